from src.event_processors.base import BaseEventProcessor, ProcessingResult, ProcessingState
from src.event_processors.pull_request import PullRequestProcessor

__all__ = ["BaseEventProcessor", "ProcessingResult", "ProcessingState", "PullRequestProcessor"]
