"""
LLM explanation layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Describe the couple's commute preferences and the ranked stations in a prompt.
- Ask the model for one short explanation per station.
- Return nothing on failure so callers fall back to template text.
"""
