"""Tools package: Gemini client, response parsing, and text utilities."""
