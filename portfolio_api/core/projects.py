"""Static catalog of portfolio projects.

Each entry links a showcase project to the demo endpoint(s) that back it.
"""

from copy import deepcopy
from typing import Any

from portfolio_api.domain.exceptions import DataNotFoundError

PROJECTS: list[dict[str, Any]] = [
    {
        "slug": "fin-viz-dashboard",
        "name": "Fin-Viz Dashboard",
        "category": "FinTech",
        "description": "Full-stack financial data visualization dashboard for stocks and crypto.",
        "techStack": ["React", "Node.js", "MongoDB"],
        "demoPath": "/demo/fin-viz",
        "api": {"summaryEndpoint": "/api/finviz/summary"},
    },
    {
        "slug": "ai-stock-prediction",
        "name": "AI Stock Prediction Model",
        "category": "AI/ML",
        "description": "Stock volatility demo backed by a simple return model.",
        "techStack": ["Python", "FastAPI", "NumPy"],
        "api": {"predictEndpoint": "/api/ai/stock-prediction"},
    },
    {
        "slug": "low-latency-trading",
        "name": "Low-Latency Trading System",
        "category": "Trading Systems",
        "description": "Backend for a simulated low-latency trading platform using Java and C++.",
        "techStack": ["Java", "C++", "Kafka"],
        "api": {"statusEndpoint": "/api/trading/status"},
    },
    {
        "slug": "blockchain-payment-gateway",
        "name": "Blockchain Payment Gateway",
        "category": "Web3",
        "description": "Ethereum-based payment processing system.",
        "techStack": ["Solidity", "React", "Web3.js"],
        "api": {
            "statusEndpoint": "/api/blockchain/status",
            "paymentsEndpoint": "/api/payments",
        },
    },
    {
        "slug": "cloud-migration-toolkit",
        "name": "Cloud Migration Toolkit",
        "category": "Cloud",
        "description": "Automated helper for migrating workloads to AWS with cost hints.",
        "techStack": ["Python", "AWS CDK", "Terraform"],
        "api": {"estimateEndpoint": "/api/cloud-migration/estimate"},
    },
    {
        "slug": "realtime-chat-app",
        "name": "Real-time Chat Application",
        "category": "Communication",
        "description": "Simple chat backend with message persistence in memory.",
        "techStack": ["FastAPI", "Vue.js", "WebSockets (future)"],
        "api": {"messagesEndpoint": "/api/chat/messages"},
    },
    {
        "slug": "mlops-pipeline",
        "name": "MLOps Pipeline Framework",
        "category": "MLOps",
        "description": "Conceptual MLOps framework for training + deployment + monitoring.",
        "techStack": ["Kubernetes", "MLflow", "Prometheus"],
        "api": {"statusEndpoint": "/api/mlops/status"},
    },
    {
        "slug": "iot-device-management",
        "name": "IoT Device Management",
        "category": "IoT",
        "description": "Mock IoT device registry and status API.",
        "techStack": ["Go", "MQTT", "TimescaleDB"],
        "api": {"devicesEndpoint": "/api/iot/devices"},
    },
    {
        "slug": "portfolio-optimizer",
        "name": "Portfolio Optimizer",
        "category": "FinTech",
        "description": "Heuristic return-over-risk portfolio weighting demo.",
        "techStack": ["Python", "NumPy"],
        "api": {"optimizeEndpoint": "/api/portfolio/optimize"},
    },
    {
        "slug": "cicd-automation-suite",
        "name": "CI/CD Automation Suite",
        "category": "DevOps",
        "description": "Mock pipeline status and quality gate checks.",
        "techStack": ["Jenkins", "Docker", "Kubernetes"],
        "api": {"pipelinesEndpoint": "/api/cicd/pipelines"},
    },
    {
        "slug": "natural-language-api",
        "name": "Natural Language API",
        "category": "AI/NLP",
        "description": "Financial text sentiment demo backed by FinBERT.",
        "techStack": ["FastAPI", "PyTorch", "Transformers"],
        "api": {"sentimentEndpoint": "/api/nlp/sentiment"},
    },
    {
        "slug": "mobile-fitness-app",
        "name": "Mobile Fitness App",
        "category": "Mobile",
        "description": "Mock workout and progress tracker endpoints.",
        "techStack": ["React Native", "Firebase", "Redux"],
        "api": {"workoutsEndpoint": "/api/fitness/workouts"},
    },
    {
        "slug": "distributed-cache-system",
        "name": "Distributed Cache System",
        "category": "Distributed Systems",
        "description": "Simple cache status mock.",
        "techStack": ["Go", "Raft", "gRPC"],
        "api": {"statsEndpoint": "/api/cache/stats"},
    },
    {
        "slug": "ar-navigation-system",
        "name": "AR Navigation System",
        "category": "AR/VR",
        "description": "Backend stub for indoor navigation routes.",
        "techStack": ["Unity", "ARKit", "C#"],
        "api": {"routesEndpoint": "/api/ar/routes"},
    },
]


def list_projects() -> list[dict[str, Any]]:
    """Return a copy of the full catalog in display order."""
    return deepcopy(PROJECTS)


def get_project(slug: str) -> dict[str, Any]:
    """Look up one project by slug.

    Raises:
        DataNotFoundError: if no project has this slug
    """
    for project in PROJECTS:
        if project["slug"] == slug:
            return deepcopy(project)
    raise DataNotFoundError("Project not found", resource=slug)
