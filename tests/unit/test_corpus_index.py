"""Unit tests for CorpusIndex."""

import pytest

from docdedup.application.use_cases.corpus.corpus_index import CorpusIndex

from tests.conftest import OTHER_OWNER, OWNER

H = "0123456789abcdef0123456789abcdef"


@pytest.mark.asyncio
async def test_unhashed_documents_are_not_candidates(fake_uow, corpus_index) -> None:
    hashed = fake_uow.documents.add(H)
    fake_uow.documents.add(None)

    candidates = await corpus_index.candidates(OWNER, None)

    assert [c.document_id for c in candidates] == [hashed.id]


@pytest.mark.asyncio
async def test_candidates_are_owner_scoped(fake_uow, corpus_index) -> None:
    mine = fake_uow.documents.add(H)
    fake_uow.documents.add(H, owner_id=OTHER_OWNER)

    candidates = await corpus_index.candidates(OWNER, None)

    assert [c.document_id for c in candidates] == [mine.id]


@pytest.mark.asyncio
async def test_excludes_the_scanned_document(fake_uow, corpus_index) -> None:
    new_doc = fake_uow.documents.add(H)
    old_doc = fake_uow.documents.add(H, age_minutes=5)

    candidates = await corpus_index.candidates(OWNER, new_doc.id)

    assert [c.document_id for c in candidates] == [old_doc.id]


@pytest.mark.asyncio
async def test_newest_first_and_capped(fake_uow, uow_factory) -> None:
    docs = [fake_uow.documents.add(H, age_minutes=i) for i in range(5)]
    index = CorpusIndex(uow_factory, candidate_limit=3)

    candidates = await index.candidates(OWNER, None)

    assert [c.document_id for c in candidates] == [d.id for d in docs[:3]]


@pytest.mark.asyncio
async def test_candidate_carries_document_metadata(fake_uow, corpus_index) -> None:
    doc = fake_uow.documents.add(H, name="contract.pdf")

    [candidate] = await corpus_index.candidates(OWNER, None)

    assert candidate.content_hash == H
    assert candidate.name == "contract.pdf"
    assert candidate.size == doc.size
    assert candidate.created_at == doc.created_at
