"""Download channel emotes listed on twitchemotes.com."""

__version__ = "1.0.0"
