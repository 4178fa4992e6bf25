"""Version command."""

from .. import __version__
from . import app
from ._common import console


@app.command()
def version():
    """Show the installed version."""
    console.print(f"design-dna {__version__}")
