"""Remote backend infrastructure package."""

from .http_remote_api import HttpRemoteApi

__all__ = ["HttpRemoteApi"]
