"""vaultlift API layer.

Each domain package exposes ``cmd_*`` functions returning a StageResult.
"""
