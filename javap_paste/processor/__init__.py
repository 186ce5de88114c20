from javap_paste.processor.base import BaseProcessor
from javap_paste.processor.factory import ProcessorFactory
from javap_paste.processor.models import ProcessingInput, ProcessingOutput

__all__ = ["BaseProcessor", "ProcessingInput", "ProcessingOutput", "ProcessorFactory"]
