"""Services layer - Application orchestration.

Available services:
- AlgorithmRunnerService: Loads graph files and runs algorithms on them
"""

from .algorithm_runner import AlgorithmRunnerService

__all__ = ["AlgorithmRunnerService"]
