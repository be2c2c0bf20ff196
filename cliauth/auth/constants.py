"""Constants for provider credential lookup and status probing."""

from __future__ import annotations

# Environment
CLAUDE_CREDENTIALS_PATH_ENV = "CLAUDE_CREDENTIALS_PATH"
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
HOME_SHORTHAND = "~/"

# Credential files, relative to the home directory
CLAUDE_CONFIG_DIR = ".claude"
CLAUDE_CREDENTIALS_FILE = ".credentials.json"
CODEX_CONFIG_DIR = ".codex"
CODEX_AUTH_FILE = "auth.json"

# Claude credential file keys
CLAUDE_ENV_BLOCK = "env"
CLAUDE_ENV_TOKEN_KEYS = ("ANTHROPIC_AUTH_TOKEN", "ANTHROPIC_API_KEY")
CLAUDE_OAUTH_BLOCK = "claudeAiOauth"
CLAUDE_LEGACY_TOKEN_KEY = "accessToken"

# Codex credential file keys
CODEX_TOKENS_BLOCK = "tokens"
CODEX_API_KEY_FIELD = "OPENAI_API_KEY"

# Cursor status probe
CURSOR_STATUS_COMMAND = ("cursor-agent", "status")
CURSOR_TIMEOUT_SECONDS = 5.0
CURSOR_LOGGED_IN_MARKER = "Logged in"

# Identity labels
IDENTITY_AUTHENTICATED = "Authenticated"
IDENTITY_SETTINGS_JSON = "Configured via settings.json"
IDENTITY_API_KEY = "API Key Auth"
IDENTITY_LOGGED_IN = "Logged in"

# Error messages
ERROR_NOT_AUTHENTICATED = "Not authenticated"
ERROR_NOT_LOGGED_IN = "Not logged in"
ERROR_COMMAND_TIMEOUT = "Command timeout"
ERROR_CURSOR_NOT_INSTALLED = "Cursor CLI not found or not installed"
ERROR_CODEX_NOT_CONFIGURED = "Codex not configured"
ERROR_NO_VALID_TOKENS = "No valid tokens found"
ERROR_INTERNAL = "Internal server error"

# Verification method tags reported by the HTTP layer
METHOD_CREDENTIALS_FILE = "credentials_file"
METHOD_CLI_STATUS = "cli_status"
