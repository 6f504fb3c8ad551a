"""Extension category classifiers.

Following maximum separation architecture - one file = one purpose.
"""

from .extension_category_classifier import (
    ExtensionCategoryClassifier,
    create_extension_category_classifier,
    DEFAULT_CATEGORIES,
)

__all__ = [
    "ExtensionCategoryClassifier",
    "create_extension_category_classifier",
    "DEFAULT_CATEGORIES",
]
