# tests/storage/test_store_contract.py
import pytest

from pagecraft.models.document import DocumentStatus
from pagecraft.schemas import DocumentCreate, DocumentPageCreate, ParagraphCreate, UserCreate
from pagecraft.storage import MemoryStore, seed_sample_data


@pytest.fixture
def owner(store):
    return store.create_user(UserCreate(username="alice"))


@pytest.fixture
def document(store, owner):
    return store.create_document(DocumentCreate(title="Lease", filename="lease.pdf", owner_id=owner.id))


def add_page(store, document_id, page_number, content=None):
    return store.create_document_page(DocumentPageCreate(
        document_id=document_id,
        page_number=page_number,
        content=content if content is not None else []
    ))


def add_paragraph(store, page_id, order_index, content="text"):
    return store.create_paragraph(ParagraphCreate(page_id=page_id, content=content, order_index=order_index))


def test_user_lookup(store, owner):
    assert store.get_user(owner.id) == owner
    assert store.get_user_by_username("alice").id == owner.id
    assert store.get_user("missing") is None
    assert store.get_user_by_username("bob") is None


def test_create_document_defaults(store, document, owner):
    assert document.total_pages == 1
    assert document.status == DocumentStatus.DRAFT
    assert document.owner_id == owner.id
    assert store.get_document(document.id) == document
    assert store.get_documents_by_owner(owner.id) == [document]
    assert store.get_documents_by_owner("nobody") == []


def test_update_document_merges_known_fields(store, document):
    updated = store.update_document(document.id, {
        "status": DocumentStatus.COMPLETED,
        "id": "hijacked",
        "unknown": 1
    })

    assert updated.id == document.id
    assert updated.status == DocumentStatus.COMPLETED
    assert updated.title == document.title
    assert updated.updated_at >= document.updated_at
    assert store.get_document(document.id).status == DocumentStatus.COMPLETED


def test_update_missing_records(store):
    assert store.update_document("missing", {"title": "x"}) is None
    assert store.update_document_page("missing", {"content": []}) is None
    assert store.update_paragraph("missing", {"content": "x"}) is None


def test_total_pages_tracks_highest_page_number(store, document):
    add_page(store, document.id, 3)
    assert store.get_document(document.id).total_pages == 3

    add_page(store, document.id, 2)
    assert store.get_document(document.id).total_pages == 3

    add_page(store, document.id, 7)
    assert store.get_document(document.id).total_pages == 7


def test_pages_sorted_by_number(store, document):
    for number in (3, 1, 2):
        add_page(store, document.id, number)

    pages = store.get_document_pages(document.id)
    assert [p.page_number for p in pages] == [1, 2, 3]
    assert store.get_document_pages("missing") == []


def test_page_content_is_opaque_json(store, document):
    content = {"blocks": [{"kind": "text", "value": "hello"}], "version": 2}
    page = add_page(store, document.id, 1, content)

    assert store.get_document_page(page.id).content == content

    updated = store.update_document_page(page.id, {"content": ["replaced"]})
    assert updated.content == ["replaced"]
    assert updated.page_number == 1


def test_paragraphs_ordered_by_page_then_index(store, document):
    second = add_page(store, document.id, 2)
    first = add_page(store, document.id, 1)
    add_paragraph(store, second.id, 0, "second-0")
    add_paragraph(store, first.id, 1, "first-1")
    add_paragraph(store, first.id, 0, "first-0")

    contents = [p.content for p in store.get_paragraphs_by_document(document.id)]
    assert contents == ["first-0", "first-1", "second-0"]
    assert [p.content for p in store.get_paragraphs_by_page(first.id)] == ["first-0", "first-1"]


def test_paragraph_defaults_and_update(store, document):
    page = add_page(store, document.id, 1)
    paragraph = add_paragraph(store, page.id, 0, "<b>Original</b>")

    assert paragraph.is_editing is False
    assert paragraph.formatting is None

    updated = store.update_paragraph(paragraph.id, {"content": "Edited", "formatting": {"bold": True}})
    assert updated.content == "Edited"
    assert updated.formatting == {"bold": True}
    assert updated.order_index == 0
    assert store.get_paragraph(paragraph.id).content == "Edited"


def test_delete_paragraph(store, document):
    page = add_page(store, document.id, 1)
    paragraph = add_paragraph(store, page.id, 0)

    assert store.delete_paragraph(paragraph.id) is True
    assert store.get_paragraph(paragraph.id) is None
    assert store.delete_paragraph(paragraph.id) is False


def test_delete_page_cascades_to_paragraphs(store, document):
    doomed = add_page(store, document.id, 1)
    kept = add_page(store, document.id, 2)
    add_paragraph(store, doomed.id, 0)
    survivor = add_paragraph(store, kept.id, 0)

    assert store.delete_document_page(doomed.id) is True
    assert store.get_document_page(doomed.id) is None
    assert store.get_paragraphs_by_page(doomed.id) == []
    assert store.get_paragraphs_by_document(document.id) == [survivor]
    assert store.delete_document_page(doomed.id) is False


def test_delete_document_cascades(store, document):
    page = add_page(store, document.id, 1)
    paragraph = add_paragraph(store, page.id, 0)

    assert store.delete_document(document.id) is True
    assert store.get_document(document.id) is None
    assert store.get_document_page(page.id) is None
    assert store.get_paragraph(paragraph.id) is None
    assert store.delete_document("missing") is False


def test_seed_sample_data(store):
    document = seed_sample_data(store)

    assert document.title == "Service Agreement Contract"
    assert document.total_pages == 3
    assert store.get_user_by_username("demo_user").id == document.owner_id

    pages = store.get_document_pages(document.id)
    assert [len(store.get_paragraphs_by_page(p.id)) for p in pages] == [2, 3, 2]
    assert len(store.get_paragraphs_by_document(document.id)) == 7


def test_memory_store_returns_copies():
    store = MemoryStore()
    document = seed_sample_data(store)
    paragraph = store.get_paragraphs_by_document(document.id)[0]
    original = paragraph.content

    paragraph.content = "mutated outside the store"
    document.title = "mutated"

    assert store.get_paragraph(paragraph.id).content == original
    assert store.get_document(document.id).title == "Service Agreement Contract"
