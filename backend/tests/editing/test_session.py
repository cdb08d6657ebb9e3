# tests/editing/test_session.py
import pytest

from pagecraft.editing import Editing, ParagraphEditor, Viewing


@pytest.fixture
def paragraphs(seeded_store, sample_document):
    return seeded_store.get_paragraphs_by_document(sample_document.id)


@pytest.fixture
def editor(seeded_store):
    return ParagraphEditor(seeded_store)


def test_starts_viewing(editor):
    assert editor.state == Viewing()
    assert editor.editing_id is None


def test_edit_and_save(editor, seeded_store, paragraphs):
    target = paragraphs[0]

    state = editor.start_edit(target.id)
    assert state.draft == target.content
    assert editor.is_editing(target.id)

    editor.update_draft("<p>Amended</p>")
    assert editor.state.is_dirty

    saved = editor.save()

    assert saved.content == "<p>Amended</p>"
    assert seeded_store.get_paragraph(target.id).content == "<p>Amended</p>"
    assert editor.state == Viewing()


def test_cancel_restores_original(editor, seeded_store, paragraphs):
    target = paragraphs[1]
    editor.start_edit(target.id)
    editor.update_draft("throwaway")

    assert editor.cancel() == target.content
    assert editor.state == Viewing()
    assert seeded_store.get_paragraph(target.id).content == target.content


def test_only_one_paragraph_edited(editor, seeded_store, paragraphs):
    first, second = paragraphs[0], paragraphs[1]
    editor.start_edit(first.id)
    editor.update_draft("unsaved")

    state = editor.start_edit(second.id)

    assert state == Editing(paragraph_id=second.id, draft=second.content, original=second.content)
    assert not editor.is_editing(first.id)
    assert seeded_store.get_paragraph(first.id).content == first.content


def test_save_after_paragraph_removed(editor, seeded_store, paragraphs):
    target = paragraphs[0]
    editor.start_edit(target.id)
    editor.update_draft("kept draft")
    seeded_store.delete_paragraph(target.id)

    with pytest.raises(KeyError):
        editor.save()

    assert editor.state.draft == "kept draft"
    assert editor.is_editing(target.id)


def test_unknown_paragraph(editor):
    with pytest.raises(KeyError):
        editor.start_edit("missing")
    assert editor.state == Viewing()


def test_actions_require_editing(editor):
    with pytest.raises(RuntimeError):
        editor.save()
    with pytest.raises(RuntimeError):
        editor.cancel()
    with pytest.raises(RuntimeError):
        editor.update_draft("x")
