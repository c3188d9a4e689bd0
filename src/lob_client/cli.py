"""
Command line entry point.

Exposes the tasks in lob_client.tasks as the ``lob`` command, e.g. ``lob get addresses``.
"""

from invoke import Program

from . import __version__
from .tasks import ns

program = Program(namespace=ns, version=__version__, name='lob', binary='lob')
