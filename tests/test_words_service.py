import logging

import pytest

from phrasebook.data.predicates import AllEntries, KeywordMatch, TagContains, UsageEquals
from phrasebook.errors import InvalidRequest, NotFound
from phrasebook.models.entry import Entry, Page
from phrasebook.service.words_service import WordsService


class RecordingRepo:
    """Stands in for WordsRepo and records what reached the store."""

    def __init__(self, page=None, deleted=1, inserted=0):
        self.page = page or Page()
        self.deleted = deleted
        self.inserted = inserted
        self.calls = []

    def find_page(self, flt, window):
        self.calls.append(("find_page", flt, window))
        return self.page

    def insert(self, entry):
        self.calls.append(("insert", entry))
        return 99

    def insert_many(self, entries):
        self.calls.append(("insert_many", entries))
        return self.inserted or len(entries)

    def delete(self, entry_id):
        self.calls.append(("delete", entry_id))
        return self.deleted


def _service(repo):
    return WordsService(repo, page_size=10, special_usages=("Proverb", "EL"))


def test_tag_filter_is_decided_before_the_repo():
    repo = RecordingRepo()
    svc = _service(repo)
    svc.list_by_tag("EL", 1)
    svc.list_by_tag("greeting", 2)
    assert repo.calls[0][1] == UsageEquals("EL")
    assert repo.calls[1][1] == TagContains("greeting")
    assert repo.calls[1][2].offset == 10


def test_unpaginated_listing_passes_no_window():
    repo = RecordingRepo()
    _service(repo).list_all()
    assert repo.calls == [("find_page", AllEntries(), None)]


@pytest.mark.parametrize("keyword", ["", "   ", "\t\n"])
def test_blank_keyword_never_reaches_store(keyword):
    repo = RecordingRepo()
    with pytest.raises(InvalidRequest):
        _service(repo).search(keyword, 1)
    assert repo.calls == []


def test_keyword_is_trimmed():
    repo = RecordingRepo(page=Page(entries=[Entry(id=1, phrase="茶")], total_count=1))
    _service(repo).search("  茶 ", 1)
    assert repo.calls[0][1] == KeywordMatch("茶")


def test_empty_search_is_not_found():
    with pytest.raises(NotFound):
        _service(RecordingRepo(page=Page(entries=[], total_count=0))).search("zzz", 1)


def test_empty_listing_page_is_not_an_error():
    page = _service(RecordingRepo(page=Page(entries=[], total_count=4))).list_page(9)
    assert page.total_count == 4
    assert page.entries == []


def test_zero_page_is_rejected_before_store():
    repo = RecordingRepo()
    with pytest.raises(InvalidRequest):
        _service(repo).list_by_tag("EL", 0)
    assert repo.calls == []


@pytest.mark.parametrize("payload", [None, [], {}, {"phrase": "x"}, "words", 3])
def test_batch_requires_non_empty_array(payload):
    repo = RecordingRepo()
    with pytest.raises(InvalidRequest):
        _service(repo).add_batch(payload)
    assert repo.calls == []


def test_batch_reports_bad_item_index():
    repo = RecordingRepo()
    with pytest.raises(InvalidRequest) as exc:
        _service(repo).add_batch([{"phrase": "好"}, {"definition": "no phrase"}])
    assert "Item 1" in exc.value.message
    assert repo.calls == []


def test_batch_returns_inserted_count():
    repo = RecordingRepo()
    assert _service(repo).add_batch([{"phrase": "一"}, {"phrase": "二"}]) == 2


def test_add_accepts_legacy_field_names():
    repo = RecordingRepo()
    assert _service(repo).add({"phrase": "好", "pronounciation": "hǎo", "audioURL": "h.mp3"}) == 99
    entry = repo.calls[0][1]
    assert entry.pronunciation == "hǎo"
    assert entry.audio_reference == "h.mp3"


def test_add_rejects_blank_phrase():
    with pytest.raises(InvalidRequest):
        _service(RecordingRepo()).add({"phrase": "  "})


def test_delete_missing_is_not_found():
    with pytest.raises(NotFound):
        _service(RecordingRepo(deleted=0)).delete(5)


def test_delete_echoes_id():
    assert _service(RecordingRepo(deleted=1)).delete(5) == 5


@pytest.mark.parametrize("entry_id", [0, -3, 2**63, 10**20])
def test_delete_id_outside_store_range_is_not_found(entry_id):
    repo = RecordingRepo()
    with pytest.raises(NotFound):
        _service(repo).delete(entry_id)
    assert repo.calls == []


def test_batch_warns_about_unstored_fields(caplog):
    caplog.set_level(logging.WARNING, logger="phrasebook.service.words_service")
    repo = RecordingRepo()
    _service(repo).add_batch([{"phrase": "一", "usage": "EL"}, {"phrase": "二", "mandarin": "two"}])
    assert "translation, usage" in caplog.text


def test_batch_without_unstored_fields_does_not_warn(caplog):
    caplog.set_level(logging.WARNING, logger="phrasebook.service.words_service")
    _service(RecordingRepo()).add_batch([{"phrase": "一", "tags": ["num"]}])
    assert caplog.records == []
