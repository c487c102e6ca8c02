"""
FAQ System - Generates traceable FAQs from a single document.
"""

from faq_system.analysis.models import FAQRecord
from faq_system.exceptions import FAQSystemError, InsufficientContentError
from faq_system.generator import FAQGenerator, generate

__version__ = "0.1.0"
__all__ = ["FAQGenerator", "FAQRecord", "FAQSystemError", "InsufficientContentError", "generate"]
