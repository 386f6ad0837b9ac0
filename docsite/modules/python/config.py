"""Configuration for the Python documentation tree."""

NAME = "python"
LABEL = "Genkit Python"
DISPLAY_NAME = "Python"

CONTENT_PREFIX = "python/docs"

API_REFERENCE_URL = "https://python.api.genkit.dev/reference/api/"
STATUS = "alpha"

# The Python tree is still flat; only plugins are grouped
SIDEBAR = [
    {"label": "Get started", "slug": "python/docs/get-started"},
    {
        "label": "API Reference",
        "link": API_REFERENCE_URL,
        "attrs": {"data-external": True, "target": "_blank"},
    },
    {"label": "Deploy with Cloud Run", "slug": "python/docs/cloud-run"},
    {"label": "Deploy with Flask", "slug": "python/docs/flask"},
    {"label": "Generating content with AI models", "slug": "python/docs/reference/models"},
    {"label": "Defining AI workflows", "slug": "python/docs/reference/flows"},
    {"label": "Tool (function) calling", "slug": "python/docs/reference/tools"},
    {"label": "Tool interrupts", "slug": "python/docs/reference/interrupts"},
    {"label": "Retrieval-augmented generation (RAG)", "slug": "python/docs/reference/rag"},
    {
        "label": "Plugins",
        "items": [
            {"label": "Google GenAI", "slug": "python/docs/reference/plugins/google-genai"},
            {"label": "Firestore Vector Store", "slug": "python/docs/reference/plugins/firestore"},
            {"label": "Ollama", "slug": "python/docs/reference/plugins/ollama"},
            {"label": "Dev Local Vector Store", "slug": "python/docs/reference/plugins/dev-local-vectorstore"},
        ],
    },
]
