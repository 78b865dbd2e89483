"""Core configuration, constants, enums and errors."""
