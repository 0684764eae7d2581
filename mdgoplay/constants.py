"""Shared constants."""

DEFAULT_FENCE = "```"
DEFAULT_LANGUAGE = "go"
EXECUTE_CURSOR_COMMAND = "markdown-goplay.execute-cursor"
OUTPUT_LOG_NAME = "markdown-goplay"
NOT_FOUND_MESSAGE = "Not found {language} code section"

EOL_LF = "\n"
EOL_CRLF = "\r\n"

STATE_IDLE = "idle"
STATE_LOCATING = "locating"
STATE_RUNNING = "running"
STATE_SPLICING = "splicing"

OUTCOME_SKIPPED = "skipped"
OUTCOME_NOT_FOUND = "not_found"
OUTCOME_FAILED = "failed"
OUTCOME_SPLICED = "spliced"
