"""Core configuration for replykit."""
