"""
Instance and InstanceCollection Tests
"""

import uuid

import pytest
from pydantic import ValidationError

from iaxscore.entities.instance import Instance, InstanceCollection


class TestInstance:

    def test_default_id_is_uuid(self, article_cls):
        article = article_cls(title="Draft")

        assert str(uuid.UUID(article.id)) == article.id
        assert article.id != article_cls(title="Draft").id

    def test_assignment_is_validated(self, article_cls):
        article = article_cls(id="a1", title="Draft")

        with pytest.raises(ValidationError):
            article.published = "not a bool at all"

    def test_hash_follows_class_and_id(self, article_cls):
        class Page(Instance):
            pass

        assert hash(article_cls(id="a1", title="One")) == hash(article_cls(id="a1", title="Two"))
        assert hash(article_cls(id="a1", title="One")) != hash(Page(id="a1"))


class TestInstanceCollection:

    def test_keeps_insertion_order(self, articles):
        assert articles.ids() == ["a1", "a2", "a3"]
        assert len(articles) == 3

    def test_add_replaces_same_id_in_place(self, articles, article_cls):
        replacement = article_cls(id="a2", title="Second, revised")

        articles.add(replacement)

        assert articles.ids() == ["a1", "a2", "a3"]
        assert len(articles) == 3
        assert articles.get("a2") is replacement
        assert [a.title for a in articles] == ["First", "Second, revised", "Third"]

    def test_add_appends_new_id(self, articles, article_cls):
        articles.add(article_cls(id="a4", title="Fourth"))

        assert articles.ids() == ["a1", "a2", "a3", "a4"]

    def test_extend_deduplicates_by_id(self, article_cls):
        collection = InstanceCollection([
            article_cls(id="a1", title="Old"),
            article_cls(id="a1", title="New"),
        ])

        assert len(collection) == 1
        assert collection.get("a1").title == "New"

    def test_get_unknown_id(self, articles):
        assert articles.get("missing") is None

    def test_to_list_dumps_instances(self, articles):
        assert articles.to_list()[0] == {"id": "a1", "title": "First", "published": False}

    def test_contains(self, articles, article_cls):
        assert article_cls(id="a1", title="Other title") in articles
        assert article_cls(id="zz", title="First") not in articles
        assert "a1" not in articles

    def test_iteration_is_restartable(self, articles):
        assert [a.id for a in articles] == [a.id for a in articles] == ["a1", "a2", "a3"]

    def test_adding_during_iteration_does_not_affect_the_pass(self, articles, article_cls):
        seen = []
        for article in articles:
            seen.append(article.id)
            if article.id == "a1":
                articles.add(article_cls(id="a4", title="Fourth"))

        assert seen == ["a1", "a2", "a3"]
        assert len(articles) == 4

    def test_empty_collection(self):
        collection = InstanceCollection()

        assert len(collection) == 0
        assert list(collection) == []
        assert repr(collection) == "InstanceCollection(0 instances)"
