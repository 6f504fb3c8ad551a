"""Upload validator.

ONLY upload validation - checks a received file descriptor against transport
status, size and extension policies and collects every applicable error.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ....config.settings import IngestSettings, get_settings
from ...core.entities.file_descriptor import FileDescriptor
from ...core.entities.validation_result import ValidationErrorKind, ValidationResult
from ...core.protocols.category_classifier import CategoryClassifier
from ...core.value_objects import FileSize, TransportStatus
from ...infrastructure.classifiers.extension_category_classifier import ExtensionCategoryClassifier
from .extension_policy import ExtensionPolicy
from .size_policy import SizeConfig, SizePolicy


logger = logging.getLogger(__name__)


# Human texts for each failure
MESSAGE_TOO_LARGE = "Filesize is too large, maximum {size} allowed"
MESSAGE_TOO_LARGE_SHORT = "Filesize exceeds {size}"
MESSAGE_TOO_LARGE_UNKNOWN = "Filesize is too large"
MESSAGE_NOT_VALID_UPLOAD = "File is not a valid upload"
MESSAGE_PARTIAL_UPLOAD = "File did not finish uploading, please try again"
MESSAGE_ZERO_SIZE = "Filesize is zero bytes."
MESSAGE_EXTENSION_NOT_ALLOWED = "Extension is not allowed (valid: {extensions})"


@dataclass
class UploadValidatorConfig:
    """Configuration for upload validator."""

    # Process-wide defaults; instance policies replace these entirely
    default_max_file_size: SizeConfig = None
    allowed_extensions: Optional[Iterable[str]] = None

    # Trust check on the transport's "genuine upload" flag (off in harnesses)
    use_is_uploaded_file: bool = False


class UploadValidator:
    """Upload validation service.

    Checks run in a fixed order:

    1. transport status - a failed transfer yields one error and stops
    2. genuine-upload flag (when enabled) - stops on failure as well
    3. zero size
    4. size limit resolved through the selector tiers
    5. extension allow-list

    Checks 3-5 all run; their errors accumulate.
    """

    def __init__(
        self,
        config: Optional[UploadValidatorConfig] = None,
        category_classifier: Optional[CategoryClassifier] = None
    ):
        """Initialize upload validator.

        Args:
            config: Validator configuration
            category_classifier: Extension -> category lookup for size policies
        """
        self._config = config or UploadValidatorConfig()
        self._classifier = category_classifier or ExtensionCategoryClassifier()
        self._default_size_policy = SizePolicy.from_config(self._config.default_max_file_size)
        self._size_policy: Optional[SizePolicy] = None
        self._extension_policy = ExtensionPolicy.of(self._config.allowed_extensions)

    @property
    def extension_policy(self) -> ExtensionPolicy:
        return self._extension_policy

    @property
    def size_policy(self) -> SizePolicy:
        """Size policy in force when a call does not pass its own."""
        return SizePolicy.effective(self._size_policy, self._default_size_policy)

    def set_allowed_max_file_size(self, rules: SizeConfig) -> None:
        """Set the instance size policy, replacing the defaults for this validator."""
        self._size_policy = SizePolicy.from_config(rules)

    def set_allowed_extensions(self, extensions: Optional[Iterable[str]]) -> None:
        self._extension_policy = ExtensionPolicy.of(extensions)

    def get_allowed_max_file_size(
        self,
        extension: Optional[str] = None,
        size_policy: Optional[SizePolicy] = None
    ) -> Optional[int]:
        """Maximum size for an extension (or category tag), None when unlimited."""
        return self._sizes(size_policy).resolve_max_size(extension, self._classifier)

    def get_largest_allowed_max_file_size(self, size_policy: Optional[SizePolicy] = None) -> Optional[int]:
        """Largest configured limit across all selectors, None when nothing is configured."""
        return self._sizes(size_policy).largest()

    def validate(
        self,
        descriptor: FileDescriptor,
        extension_policy: Optional[ExtensionPolicy] = None,
        size_policy: Optional[SizePolicy] = None,
        result: Optional[ValidationResult] = None
    ) -> ValidationResult:
        """Validate a file descriptor.

        Args:
            descriptor: The received file
            extension_policy: Allow-list for this call (validator's own when None)
            size_policy: Size policy for this call; replaces the defaults
            result: Result to record into; it is cleared first

        Returns:
            ValidationResult, valid when it holds no errors
        """
        if result is None:
            result = ValidationResult()
        else:
            result.clear()

        sizes = self._sizes(size_policy)
        extensions = extension_policy if extension_policy is not None else self._extension_policy

        if not self._check_transport(descriptor, sizes, result):
            return result

        if not self._check_uploaded_flag(descriptor, result):
            return result

        size = descriptor.read_size()
        extension = descriptor.effective_extension

        if size == 0:
            result.add(ValidationErrorKind.ZERO_SIZE, MESSAGE_ZERO_SIZE)

        limit = sizes.lookup(extension, self._classifier)
        if limit is not None and size > limit.max_bytes:
            result.add(
                ValidationErrorKind.SIZE_EXCEEDED,
                MESSAGE_TOO_LARGE.format(size=FileSize(limit.max_bytes).format_size()),
                limit=limit.max_bytes,
                selector=limit.selector,
                size=size,
            )

        if not extensions.allows(extension):
            result.add(
                ValidationErrorKind.EXTENSION_NOT_ALLOWED,
                MESSAGE_EXTENSION_NOT_ALLOWED.format(extensions=extensions.describe()),
                extension=extension,
            )

        if not result.is_valid:
            logger.debug(f"Rejected '{descriptor.declared_name}': {result.messages}")

        return result

    def _sizes(self, size_policy: Optional[SizePolicy]) -> SizePolicy:
        if size_policy is not None:
            return SizePolicy.effective(size_policy, self.size_policy)
        return self.size_policy

    def _check_transport(
        self,
        descriptor: FileDescriptor,
        sizes: SizePolicy,
        result: ValidationResult
    ) -> bool:
        """Map a failed transport status onto exactly one error."""
        status = descriptor.transport_status
        if status.is_ok:
            return True

        if status.is_size_error:
            # Quotes the largest limit of any selector, matching or not
            largest = sizes.largest()
            if largest is not None:
                message = MESSAGE_TOO_LARGE.format(size=FileSize(largest).format_size())
            elif descriptor.declared_size_bytes:
                message = MESSAGE_TOO_LARGE_SHORT.format(
                    size=FileSize(descriptor.declared_size_bytes).format_size()
                )
            else:
                message = MESSAGE_TOO_LARGE_UNKNOWN
            result.add(ValidationErrorKind.TRANSPORT_ERROR, message, subkind=status.value, limit=largest)
        elif status is TransportStatus.PARTIAL_UPLOAD:
            result.add(ValidationErrorKind.TRANSPORT_ERROR, MESSAGE_PARTIAL_UPLOAD, subkind=status.value)
        else:
            result.add(ValidationErrorKind.TRANSPORT_ERROR, MESSAGE_NOT_VALID_UPLOAD, subkind=status.value)

        logger.debug(f"Transport rejected '{descriptor.declared_name}': {status.value}")
        return False

    def _check_uploaded_flag(self, descriptor: FileDescriptor, result: ValidationResult) -> bool:
        if not self._config.use_is_uploaded_file or descriptor.is_uploaded_file:
            return True

        result.add(
            ValidationErrorKind.TRANSPORT_ERROR,
            MESSAGE_NOT_VALID_UPLOAD,
            subkind="not_uploaded_file",
        )
        return False


def create_upload_validator(
    settings: Optional[IngestSettings] = None,
    category_classifier: Optional[CategoryClassifier] = None
) -> UploadValidator:
    """Create upload validator from ingestion settings."""
    settings = settings or get_settings()

    config = UploadValidatorConfig(
        default_max_file_size=dict(settings.default_max_file_size),
        allowed_extensions=list(settings.allowed_extensions),
        use_is_uploaded_file=settings.use_is_uploaded_file,
    )
    return UploadValidator(config, category_classifier)
