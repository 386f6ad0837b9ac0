"""Python documentation tree."""

from docsite.modules.base import DocTreeModule
from docsite.modules.python import config


class PythonModule(DocTreeModule):
    """Pages under content/python/docs."""

    config = config
