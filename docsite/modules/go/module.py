"""Go documentation tree."""

from docsite.modules.base import DocTreeModule
from docsite.modules.go import config


class GoModule(DocTreeModule):
    """Pages under content/go/docs."""

    config = config
