"""Configuration for the Go documentation tree."""

NAME = "go"
LABEL = "Genkit Go"
DISPLAY_NAME = "Go"

CONTENT_PREFIX = "go/docs"

API_REFERENCE_URL = "https://pkg.go.dev/github.com/firebase/genkit/go"
STATUS = "beta"

SIDEBAR = [
    {"label": "Get started", "slug": "go/docs/get-started-go"},
    {
        "label": "API Reference",
        "link": API_REFERENCE_URL,
        "attrs": {"data-external": True, "target": "_blank"},
    },
    {
        "label": "Building AI workflows",
        "items": [
            {"label": "Generating content", "slug": "go/docs/models"},
            {"label": "Creating flows", "slug": "go/docs/flows"},
            {"label": "Managing prompts with Dotprompt", "slug": "go/docs/dotprompt"},
            {"label": "Tool calling", "slug": "go/docs/tool-calling"},
            {"label": "Retrieval-augmented generation (RAG)", "slug": "go/docs/rag"},
            {"label": "Evaluation", "slug": "go/docs/evaluation"},
            {"label": "Observability & monitoring", "slug": "go/docs/monitoring"},
        ],
    },
    {
        "label": "Deploying AI workflows",
        "items": [
            {"label": "Deploy with Cloud Run", "slug": "go/docs/cloud-run"},
            {"label": "Deploy with any hosting service", "slug": "go/docs/deploy"},
        ],
    },
    {
        "label": "Writing plugins",
        "items": [
            {"label": "Overview", "slug": "go/docs/plugin-authoring"},
            {"label": "Writing a model plugin", "slug": "go/docs/plugin-authoring-models"},
            {"label": "Writing a telemetry plugin", "slug": "go/docs/plugin-authoring-telemetry"},
        ],
    },
    {
        "label": "Plugins",
        "items": [
            {"label": "Google Generative AI", "slug": "go/docs/plugins/google-genai"},
            {"label": "Google Cloud", "slug": "go/docs/plugins/google-cloud"},
            {
                "label": "Partner & 3P Plugins",
                "items": [
                    {"label": "Overview", "slug": "go/docs/plugins/third-party-plugins"},
                    {"label": "Ollama", "slug": "go/docs/plugins/ollama"},
                    {"label": "pgvector", "slug": "go/docs/plugins/pgvector"},
                    {"label": "Pinecone", "slug": "go/docs/plugins/pinecone"},
                ],
            },
        ],
    },
]
