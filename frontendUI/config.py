"""
Configuration for the ProteinMaster Gradio application.
"""
import os

# Server defaults, overridable from the environment or the command line
SERVER_NAME = os.environ.get("PROTEINMASTER_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("PROTEINMASTER_PORT", "7860"))
LOG_DIR = os.environ.get("PROTEINMASTER_LOG_DIR")  # console only when unset

# How often the page polls timers (animation windows and hints), in seconds
POLL_SECONDS = 0.5

QUIZ_TOPIC = "Proteins"
QUIZ_DIFFICULTY = "IB"

APP_TITLE = "ProteinMaster"
APP_TAGLINE = "From amino acids to functional proteins: build, link, fold and test yourself."

# Custom CSS
CUSTOM_CSS = """
.canvas-panel {
    background-color: #0f172a;
    border-radius: 24px;
    border: 4px solid #e2e8f0;
    overflow: hidden;
}
.hint-banner p {
    color: #b91c1c !important;
    font-weight: 600;
}
.stage-card h3 {
    margin-bottom: 0 !important;
}
.success-banner p {
    color: #15803d !important;
    font-weight: 600;
}
"""
