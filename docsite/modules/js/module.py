"""JavaScript/Node.js documentation tree."""

from docsite.modules.base import DocTreeModule
from docsite.modules.js import config


class JSModule(DocTreeModule):
    """Pages under content/docs."""

    config = config
