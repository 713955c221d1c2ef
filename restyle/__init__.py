"""
Restyle - AI room, garden and exterior redesign client.

Builds natural-language prompts from structured design selections and
submits them to the Runware image inference API.
"""

__version__ = "1.0.0"
