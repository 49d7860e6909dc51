"""Platform detection, artifact selection and extraction, link metadata and auth tokens for a Roblox toolchain manager."""

__version__ = "1.0.0"