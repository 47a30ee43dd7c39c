from .git_manager_protocol import GitManagerProtocol

__all__ = ["GitManagerProtocol"]
