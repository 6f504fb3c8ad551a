"""Extension category classifier.

ONLY extension categorization - a static extension -> category table used as
the default CategoryClassifier for size policies.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Dict, Iterable, Mapping, Optional

from ...core.value_objects.asset_name import normalize_extension


ARCHIVE_EXTENSIONS = frozenset({
    '7z', 'bz2', 'dmg', 'gz', 'rar', 'tar', 'tar.gz', 'tar.bz2', 'tar.xz',
    'tgz', 'xz', 'zip', 'zipx',
})

AUDIO_EXTENSIONS = frozenset({
    'aac', 'aif', 'aifc', 'aiff', 'flac', 'm4a', 'mid', 'midi', 'mp3', 'oga',
    'ogg', 'opus', 'ra', 'snd', 'wav', 'wma',
})

DOCUMENT_EXTENSIONS = frozenset({
    'css', 'csv', 'doc', 'docx', 'dotm', 'dotx', 'htm', 'html', 'json', 'md',
    'odp', 'ods', 'odt', 'pdf', 'potm', 'potx', 'pps', 'ppt', 'pptx', 'rtf',
    'txt', 'xhtml', 'xls', 'xlsx', 'xltm', 'xltx', 'xml',
})

IMAGE_EXTENSIONS = frozenset({
    'alpha', 'als', 'bmp', 'cel', 'gif', 'heic', 'ico', 'icon', 'jpeg', 'jpg',
    'pcx', 'png', 'ps', 'psd', 'svg', 'tif', 'tiff', 'webp',
})

VIDEO_EXTENSIONS = frozenset({
    '3gp', 'asf', 'asx', 'avi', 'flv', 'm1v', 'm2v', 'm4v', 'mkv', 'mov',
    'mp4', 'mpe', 'mpeg', 'mpg', 'ogv', 'qt', 'webm', 'wmv',
})

DEFAULT_CATEGORIES: Dict[str, Iterable[str]] = {
    'archive': ARCHIVE_EXTENSIONS,
    'audio': AUDIO_EXTENSIONS,
    'document': DOCUMENT_EXTENSIONS,
    'image': IMAGE_EXTENSIONS,
    'video': VIDEO_EXTENSIONS,
}


class ExtensionCategoryClassifier:
    """Static extension -> "[category]" classifier.

    Categories are given as name -> extensions; the first category listing
    an extension wins.
    """

    def __init__(self, categories: Optional[Mapping[str, Iterable[str]]] = None):
        self._by_extension: Dict[str, str] = {}
        for category, extensions in (categories or DEFAULT_CATEGORIES).items():
            tag = f"[{category.strip('[]').lower()}]"
            for extension in extensions:
                self._by_extension.setdefault(normalize_extension(extension), tag)

    def category_of(self, extension: str) -> Optional[str]:
        return self._by_extension.get(normalize_extension(extension))

    def extensions_in(self, category: str) -> frozenset:
        """All extensions mapped to a category tag or name."""
        tag = f"[{category.strip('[]').lower()}]"
        return frozenset(ext for ext, cat in self._by_extension.items() if cat == tag)


def create_extension_category_classifier(
    categories: Optional[Mapping[str, Iterable[str]]] = None
) -> ExtensionCategoryClassifier:
    """Create extension category classifier."""
    return ExtensionCategoryClassifier(categories)
