from searchserver.document import Document, DocumentStatus


def test_str_format():
    doc = Document(1, 0.5, 2)
    assert str(doc) == "{ document_id = 1, relevance = 0.5, rating = 2 }"


def test_str_uses_short_float_form():
    doc = Document(3, 0.25, -1)
    assert str(doc) == "{ document_id = 3, relevance = 0.25, rating = -1 }"


def test_defaults():
    doc = Document()
    assert (doc.id, doc.relevance, doc.rating) == (0, 0.0, 0)


def test_equality_by_fields():
    assert Document(1, 0.5, 2) == Document(id=1, relevance=0.5, rating=2)
    assert Document(1, 0.5, 2) != Document(1, 0.5, 3)


def test_statuses_round_trip_by_value_and_name():
    names = ["ACTUAL", "IRRELEVANT", "BANNED", "REMOVED"]
    statuses = [DocumentStatus[name] for name in names]
    assert [DocumentStatus(s.value) for s in statuses] == statuses
    assert [s.name for s in DocumentStatus] == names
    assert len({s.value for s in statuses}) == 4