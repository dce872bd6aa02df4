from podlint.pipeline.executor import PodspecLintExecutor

__all__ = ["PodspecLintExecutor"]
