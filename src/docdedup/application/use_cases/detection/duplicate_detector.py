"""Duplicate detector - exact and similar matches for a newly ingested document."""

import logging
from uuid import UUID

from docdedup.application.dto.detection_config import DetectionConfig
from docdedup.application.dto.duplicate_dto import (
    CorpusCandidate,
    DuplicateResult,
    ExactMatch,
    SimilarMatch,
)
from docdedup.application.events import emit_quietly
from docdedup.application.ports import EventSink, Fingerprinter
from docdedup.application.use_cases.corpus.corpus_index import CorpusIndex
from docdedup.application.use_cases.suppression.suppression_ledger import (
    SuppressionLedger,
)
from docdedup.domain.entities import ActivityEvent
from docdedup.domain.exceptions import DocDedupError, InconsistentState
from docdedup.domain.similarity import positional_similarity
from docdedup.domain.value_objects import ActivityAction

logger = logging.getLogger(__name__)


def _require_hash(candidate: CorpusCandidate) -> str:
    if candidate.content_hash is None:
        raise InconsistentState(
            f"Candidate {candidate.document_id} reached the detector without a content hash"
        )
    return candidate.content_hash


class DuplicateDetector:
    """Partitions an owner's corpus into exact and similar matches.

    Detection is best-effort: a failed scan returns an empty result and is
    reported through the event sink instead of raising, so that it never
    blocks the ingestion that triggered it.
    """

    def __init__(
        self,
        corpus_index: CorpusIndex,
        suppression_ledger: SuppressionLedger,
        fingerprinter: Fingerprinter,
        event_sink: EventSink,
        config: DetectionConfig | None = None,
    ) -> None:
        self._corpus = corpus_index
        self._ledger = suppression_ledger
        self._fingerprinter = fingerprinter
        self._events = event_sink
        self._config = config or DetectionConfig()

    async def check_content(
        self, owner_id: str, content: bytes, document_id: UUID
    ) -> DuplicateResult:
        """Fingerprint content, then detect duplicates for it."""
        try:
            content_hash = self._fingerprinter.fingerprint(content)
        except DocDedupError as e:
            return await self._failed(owner_id, document_id, e)
        return await self.detect(owner_id, content_hash, document_id)

    async def detect(
        self, owner_id: str, new_content_hash: str, new_document_id: UUID | None
    ) -> DuplicateResult:
        """Find exact and similar documents for new_content_hash."""
        try:
            candidates = await self._corpus.candidates(owner_id, new_document_id)
            entries = await self._ledger.entries(owner_id)
        except DocDedupError as e:
            return await self._failed(owner_id, new_document_id, e)

        suppressed = {entry.pair for entry in entries}
        usable: list[tuple[CorpusCandidate, str]] = []
        for candidate in candidates:
            try:
                candidate_hash = _require_hash(candidate)
            except InconsistentState as e:
                logger.warning("Skipping candidate: %s", e)
                continue
            if frozenset((new_content_hash, candidate_hash)) in suppressed:
                continue
            usable.append((candidate, candidate_hash))

        result = DuplicateResult(
            exact=self._exact_matches(new_content_hash, usable),
            similar=self._similar_matches(new_content_hash, usable),
        )
        logger.debug(
            "Duplicate check for %s (owner %s): %d candidates, %d exact, %d similar",
            new_document_id,
            owner_id,
            len(usable),
            len(result.exact),
            len(result.similar),
        )
        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.CHECK_COMPLETED,
                subject_id=new_document_id,
                payload={
                    "candidates": len(candidates),
                    "suppressed": len(candidates) - len(usable),
                    "exact_duplicates_found": len(result.exact),
                    "similar_documents_found": len(result.similar),
                },
            ),
        )
        return result

    def _exact_matches(
        self, new_hash: str, usable: list[tuple[CorpusCandidate, str]]
    ) -> list[ExactMatch]:
        return [
            ExactMatch(
                document_id=c.document_id,
                name=c.name,
                size=c.size,
                created_at=c.created_at,
            )
            for c, h in usable
            if h == new_hash
        ]

    def _similar_matches(
        self, new_hash: str, usable: list[tuple[CorpusCandidate, str]]
    ) -> list[SimilarMatch]:
        scored = [
            SimilarMatch(
                document_id=c.document_id,
                name=c.name,
                size=c.size,
                created_at=c.created_at,
                similarity_score=positional_similarity(new_hash, h),
            )
            for c, h in usable
        ]
        kept = [m for m in scored if m.similarity_score >= self._config.similarity_threshold]
        # sorted() is stable: equal scores keep corpus order
        kept = sorted(kept, key=lambda m: m.similarity_score, reverse=True)
        return kept[: self._config.similar_limit]

    async def _failed(
        self, owner_id: str, document_id: UUID | None, error: Exception
    ) -> DuplicateResult:
        logger.error(
            "Duplicate check failed for document %s (owner %s): %s",
            document_id,
            owner_id,
            error,
        )
        await emit_quietly(
            self._events,
            ActivityEvent(
                owner_id=owner_id,
                action=ActivityAction.CHECK_FAILED,
                subject_id=document_id,
                payload={"error": str(error)},
            ),
        )
        return DuplicateResult()
