"""Tests for the factory method demo."""
import pytest
from patterns import (
    Application,
    DocumentRegistry,
    MyApplication,
    MyDocument
)
from utils.exceptions import CapacityExceededError


class TestDocumentRegistry:
    """Tests for the document registry."""

    def test_append_keeps_order(self):
        registry = DocumentRegistry(capacity=3)
        docs = [MyDocument(name) for name in ("a", "b", "c")]
        for doc in docs:
            registry.append(doc)

        assert list(registry) == docs
        assert registry[1].get_name() == "b"
        assert registry.is_full()

    def test_append_beyond_capacity(self):
        registry = DocumentRegistry(capacity=1)
        registry.append(MyDocument("a"))

        with pytest.raises(CapacityExceededError) as exc_info:
            registry.append(MyDocument("b"))

        assert exc_info.value.details == {'capacity': 1}
        assert len(registry) == 1

    def test_unbounded(self):
        registry = DocumentRegistry(capacity=None)
        for i in range(50):
            registry.append(MyDocument(str(i)))
        assert len(registry) == 50
        assert not registry.is_full()

    def test_negative_capacity(self):
        with pytest.raises(ValueError):
            DocumentRegistry(capacity=-1)


class TestApplication:
    """Tests for the application framework."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            Application()

    def test_constructor_output(self, capsys):
        MyApplication()
        assert capsys.readouterr().out == "Application: ctor\nMyApplication: ctor\n"

    def test_new_document(self, capsys):
        app = MyApplication()
        capsys.readouterr()

        doc = app.new_document("foo")

        assert isinstance(doc, MyDocument)
        assert doc.get_name() == "foo"
        assert capsys.readouterr().out.splitlines() == [
            "Application: NewDocument()",
            "   MyApplication: CreateDocument()",
            "   MyDocument: Open()",
        ]

    def test_documents_in_call_order(self):
        app = MyApplication()
        names = ["one", "two", "three", "four"]
        for name in names:
            app.new_document(name)

        assert len(app.documents) == len(names)
        assert [doc.get_name() for doc in app.documents] == names

    def test_report_docs(self, capsys):
        app = MyApplication()
        app.new_document("foo")
        app.new_document("bar")
        capsys.readouterr()

        app.report_docs()

        assert capsys.readouterr().out.splitlines() == [
            "Application: ReportDocs()",
            "   foo",
            "   bar",
        ]

    def test_long_names_are_kept(self):
        app = MyApplication()
        name = "x" * 100
        assert app.new_document(name).get_name() == name

    def test_default_capacity(self, capsys):
        app = MyApplication()
        for i in range(10):
            app.new_document(f"doc{i}")
        capsys.readouterr()

        with pytest.raises(CapacityExceededError):
            app.new_document("overflow")

        # The hook is not called once the registry is full
        assert capsys.readouterr().out == "Application: NewDocument()\n"
        assert len(app.documents) == 10

    def test_unbounded_capacity(self):
        app = MyApplication(capacity=None)
        for i in range(11):
            app.new_document(f"doc{i}")
        assert len(app.documents) == 11

    def test_close_documents(self, capsys):
        app = MyApplication()
        app.new_document("foo")
        app.new_document("bar")
        capsys.readouterr()

        app.open_document()
        app.close_documents()

        assert capsys.readouterr().out == "   MyDocument: Close()\n" * 2
