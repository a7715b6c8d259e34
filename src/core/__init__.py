"""Core domain package for the checklist assistant.

Core contains contact extraction, template matching and comment rendering
without any storage or terminal-specific code, keeping the business logic
portable.
"""
