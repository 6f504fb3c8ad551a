"""Ingest file command.

ONLY file ingestion - takes a fully received file through validation, name
resolution and visibility resolution, then commits its bytes and metadata
record.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import dataclasses
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple

from ....config.settings import IngestSettings, get_settings
from ...core.entities.asset_record import AssetRecord
from ...core.entities.file_descriptor import FileDescriptor
from ...core.entities.validation_result import ValidationResult
from ...core.exceptions.content_conflict import ContentConflict
from ...core.exceptions.record_conflict import RecordConflict
from ...core.protocols.category_classifier import CategoryClassifier
from ...core.protocols.container_tree import ContainerTree
from ...core.protocols.content_store import ContentStore
from ...core.protocols.record_store import RecordStore
from ...core.value_objects import AssetId, AssetName, ContainerId, Visibility, VisibilityMode
from ..services.name_resolver import NameResolver, create_name_resolver
from ..services.visibility_resolver import VisibilityResolver
from ..validators.extension_policy import ExtensionPolicy
from ..validators.size_policy import SizePolicy
from ..validators.upload_validator import UploadValidator, create_upload_validator


logger = logging.getLogger(__name__)


class IngestionState(Enum):
    """Ingestion states; REJECTED and COMMITTED are terminal."""
    RECEIVED = "received"
    VALIDATED = "validated"
    NAME_RESOLVED = "name_resolved"
    VISIBILITY_RESOLVED = "visibility_resolved"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass
class IngestFileData:
    """Data required to ingest a file."""

    # Required fields (no defaults)
    descriptor: FileDescriptor

    # Optional fields (with defaults)
    container_id: Optional[ContainerId] = None
    target_record: Optional[AssetRecord] = None
    replace_existing: Optional[bool] = None  # None uses the command default
    visibility_mode: Optional[VisibilityMode] = None
    extension_policy: Optional[ExtensionPolicy] = None
    size_policy: Optional[SizePolicy] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class IngestFileResult:
    """Result of file ingestion."""

    # Required fields
    success: bool
    state: IngestionState

    # Optional fields (with defaults)
    record: Optional[AssetRecord] = None
    location: Optional[str] = None
    validation: ValidationResult = field(default_factory=ValidationResult)
    replaced: bool = False
    duration_ms: int = 0

    # Error information
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[Dict[str, Any]] = None
    retryable: bool = False

    @property
    def asset_id(self) -> Optional[AssetId]:
        return self.record.id if self.record is not None else None


class IngestFileCommand:
    """Command to ingest a single received file.

    Runs the ingestion state machine::

        RECEIVED -> VALIDATED -> NAME_RESOLVED -> VISIBILITY_RESOLVED -> COMMITTED
            \\-> REJECTED

    Replacing an existing record skips NAME_RESOLVED: the record keeps its
    name and identity, and its derived artifacts are invalidated during
    commit. Content for a new record is written exclusively; when another
    ingestion occupied the resolved name first, the next free name is
    resolved instead. Validation failures and record conflicts come back as
    unsuccessful results; collaborator faults propagate.
    """

    def __init__(
        self,
        validator: UploadValidator,
        name_resolver: NameResolver,
        visibility_resolver: VisibilityResolver,
        record_store: RecordStore,
        content_store: ContentStore,
        replace_existing: bool = False
    ):
        """Initialize ingest file command.

        Args:
            validator: Upload validator
            name_resolver: Collision-free name picker
            visibility_resolver: Effective visibility resolver
            record_store: Asset record persistence
            content_store: Asset content storage
            replace_existing: Default replace mode when the data does not set one
        """
        self._validator = validator
        self._name_resolver = name_resolver
        self._visibility_resolver = visibility_resolver
        self._record_store = record_store
        self._content_store = content_store
        self._replace_existing = replace_existing

    async def execute(self, data: IngestFileData) -> IngestFileResult:
        """Execute file ingestion.

        Args:
            data: File descriptor, target container and options

        Returns:
            Result of the ingestion

        Raises:
            NameResolutionExhausted: If no free name was found
            VisibilityCycleDetected: If the container chain loops
        """
        start_time = time.perf_counter()
        descriptor = data.descriptor
        state = self._transition(descriptor, IngestionState.RECEIVED)

        validation = self._validator.validate(
            descriptor,
            extension_policy=data.extension_policy,
            size_policy=data.size_policy,
        )
        if not validation.is_valid:
            state = self._transition(descriptor, IngestionState.REJECTED)
            logger.info(f"Rejected '{descriptor.declared_name}': {'; '.join(validation.messages)}")
            return IngestFileResult(
                success=False,
                state=state,
                validation=validation,
                duration_ms=self._elapsed_ms(start_time),
                error_code="VALIDATION_FAILED",
                error_message=validation.messages[0],
                error_details={"errors": [error.to_dict() for error in validation.errors]},
            )
        state = self._transition(descriptor, IngestionState.VALIDATED)

        try:
            replace = self._replace_existing if data.replace_existing is None else data.replace_existing
            record = await self._find_replace_target(data) if replace else None
            replaced = record is not None

            if replaced:
                name = record.name
                container_id = record.container_id
                if data.visibility_mode is not None:
                    record.visibility_mode = data.visibility_mode
                if data.metadata:
                    record.metadata = {**record.metadata, **data.metadata}
            else:
                container_id = data.container_id
                name = await self._resolve_name(descriptor.asset_name, container_id)
                state = self._transition(descriptor, IngestionState.NAME_RESOLVED)
                record = AssetRecord(
                    name=name,
                    container_id=container_id,
                    visibility_mode=data.visibility_mode or VisibilityMode.inherit(),
                    metadata=dict(data.metadata or {}),
                )

            visibility = await self._visibility_resolver.resolve(record)
            state = self._transition(descriptor, IngestionState.VISIBILITY_RESOLVED)

            content = await asyncio.to_thread(Path(descriptor.source_path).read_bytes)
            if replaced:
                location = await self._content_store.write(container_id, name, visibility, content)
                await self._content_store.invalidate_derived(record.id)
            else:
                name, location = await self._write_new(descriptor, container_id, name, visibility, content)

            record.apply_content(name, visibility, len(content), descriptor.mime_hint, location)
            try:
                asset_id = await self._record_store.upsert(record)
            except RecordConflict:
                if not replaced:
                    await self._content_store.delete(location)
                raise
            record.assign_identity(asset_id)

        except RecordConflict as e:
            logger.warning(f"Record conflict committing '{descriptor.declared_name}': {e.message}")
            return IngestFileResult(
                success=False,
                state=state,
                validation=validation,
                duration_ms=self._elapsed_ms(start_time),
                error_code=e.error_code,
                error_message=e.message,
                error_details=e.details,
                retryable=True,
            )

        except Exception as e:
            logger.error(f"Ingestion of '{descriptor.declared_name}' failed in state {state.value}: {e}", exc_info=True)
            raise

        state = self._transition(descriptor, IngestionState.COMMITTED)
        logger.info(f"Committed {record} ({visibility.value}, {record.size_bytes} bytes)")

        return IngestFileResult(
            success=True,
            state=state,
            record=record,
            location=location,
            validation=validation,
            replaced=replaced,
            duration_ms=self._elapsed_ms(start_time),
        )

    async def _find_replace_target(self, data: IngestFileData) -> Optional[AssetRecord]:
        """Existing record to replace, or None to create a new one."""
        if data.target_record is not None and not data.target_record.is_new:
            target = data.target_record
            return dataclasses.replace(target, metadata=dict(target.metadata))

        container_id = data.container_id
        if data.target_record is not None and data.target_record.container_id is not None:
            container_id = data.target_record.container_id

        existing = await self._record_store.find_by_name(container_id, data.descriptor.asset_name)
        if existing is None or existing.is_new:
            return None
        return existing

    async def _write_new(
        self,
        descriptor: FileDescriptor,
        container_id: Optional[ContainerId],
        name: AssetName,
        visibility: Visibility,
        content: bytes
    ) -> Tuple[AssetName, str]:
        """Write content for a new record without touching existing content.

        A name whose location another ingestion occupied first counts as
        taken, and name resolution moves on to the next free candidate.
        """
        occupied: Set[str] = set()
        while True:
            try:
                location = await self._content_store.write(
                    container_id, name, visibility, content, replace=False
                )
                return name, location
            except ContentConflict as e:
                logger.info(f"Name '{name}' was claimed concurrently, resolving again: {e.message}")
                occupied.add(name.filename.lower())
                name = await self._resolve_name(descriptor.asset_name, container_id, occupied)

    async def _resolve_name(
        self,
        name: AssetName,
        container_id: Optional[ContainerId],
        occupied: Optional[Set[str]] = None
    ) -> AssetName:
        async def is_taken(candidate: AssetName) -> bool:
            if occupied and candidate.filename.lower() in occupied:
                return True
            return await self._record_store.name_exists(container_id, candidate)

        return await self._name_resolver.resolve(name, is_taken, container_id)

    def _transition(self, descriptor: FileDescriptor, state: IngestionState) -> IngestionState:
        logger.debug(f"Ingestion of '{descriptor.declared_name}' -> {state.value}")
        return state

    def _elapsed_ms(self, start_time: float) -> int:
        return int((time.perf_counter() - start_time) * 1000)


def create_ingest_file_command(
    record_store: RecordStore,
    content_store: ContentStore,
    container_tree: ContainerTree,
    settings: Optional[IngestSettings] = None,
    category_classifier: Optional[CategoryClassifier] = None
) -> IngestFileCommand:
    """Create ingest file command wired from ingestion settings."""
    settings = settings or get_settings()
    return IngestFileCommand(
        validator=create_upload_validator(settings, category_classifier),
        name_resolver=create_name_resolver(settings),
        visibility_resolver=VisibilityResolver(container_tree),
        record_store=record_store,
        content_store=content_store,
        replace_existing=settings.replace_existing,
    )
