"""
================================================================================
DEFAULT VALUES CONSTANTS
================================================================================
Defaults for the run configuration and the crawl file patterns.
This is the single source of truth for pipeline defaults.
================================================================================
"""

# =============================================================================
# DEFAULT RUN CONFIGURATION
# =============================================================================
DEFAULT_MAX_FILE_SIZE = 100000  # Maximum file size in bytes (about 100KB)
DEFAULT_LANGUAGE = "english"    # Default tutorial language
DEFAULT_MAX_ABSTRACTIONS = 10   # Maximum number of abstractions to identify

# =============================================================================
# OUTPUT FORMATTING
# =============================================================================
MAX_MERMAID_LABEL_LENGTH = 30
ATTRIBUTION = (
    "Generated by [AI Codebase Knowledge Builder]"
    "(https://github.com/The-Pocket/Tutorial-Codebase-Knowledge)"
)

# =============================================================================
# FILE PATTERNS
# =============================================================================
DEFAULT_INCLUDE_PATTERNS = {
    "*.py", "*.js", "*.jsx", "*.ts", "*.tsx", "*.go", "*.java", "*.pyi", "*.pyx",
    "*.c", "*.cs", "*.cc", "*.cpp", "*.h", "*.md", "*.rst", "Dockerfile",
    "Makefile", "*.yaml", "*.yml",
}

DEFAULT_EXCLUDE_PATTERNS = {
    "assets/*", "data/*", "images/*", "public/*", "static/*", "temp/*",
    "*docs/*",
    "*venv/*",
    "*.venv/*",
    "*test*",
    "*tests/*",
    "*examples/*",
    "v1/*",
    "*dist/*",
    "*build/*",
    "*experimental/*",
    "*deprecated/*",
    "*misc/*",
    "*legacy/*",
    ".git/*", ".github/*", ".next/*", ".vscode/*",
    "*obj/*",
    "*bin/*",
    "*node_modules/*",
    "*.log"
}
