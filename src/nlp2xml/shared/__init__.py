from nlp2xml.shared.logger import PipelineLogger

__all__ = ["PipelineLogger"]
