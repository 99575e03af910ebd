"""genservice - Scaffold a minimal Express + TypeScript web service."""

__version__ = "0.1.0"
