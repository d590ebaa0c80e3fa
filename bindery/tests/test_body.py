"""Tests for request bodies and model serialization."""

import json

from bindery.core.body import EMPTY_BODY, NO_BODY, ApiModel, JsonBody
from bindery.github.models import GistFileUpdate, GistsUpdateRequest
from bindery.ramp.models import PatchUsersIdRequest, PostUsersDeferredRequest, UserRole


class Inner(ApiModel):
    name: str | None = None
    size: int | None = None


class Outer(ApiModel):
    __nullable_fields__ = frozenset({'note'})

    title: str | None = None
    note: str | None = None
    inner: Inner | None = None


def decode(body: JsonBody) -> dict:
    return json.loads(body.content())


class TestBodyVariants:
    """Tests for the no-body / empty-body / JSON-body distinction."""

    def test_no_body(self):
        assert NO_BODY.content() is None
        assert NO_BODY.headers() == {}

    def test_empty_body_is_zero_length(self):
        """Test that the empty body announces Content-Length: 0."""
        assert EMPTY_BODY.content() == b''
        assert EMPTY_BODY.headers() == {'Content-Length': '0'}

    def test_no_body_and_empty_body_differ(self):
        assert NO_BODY != EMPTY_BODY

    def test_json_body_content_type(self):
        body = JsonBody.from_data({'a': 1})
        assert body.headers() == {'Content-Type': 'application/json'}
        assert decode(body) == {'a': 1}

    def test_json_body_from_data_accepts_models(self):
        body = JsonBody.from_data(Inner(name='x'))
        assert decode(body) == {'name': 'x'}


class TestModelSerialization:
    """Tests for omitting absent fields and keeping explicit nulls."""

    def test_absent_fields_are_omitted(self):
        assert decode(JsonBody.from_model(Outer(title='t'))) == {'title': 't'}

    def test_none_is_omitted_for_regular_fields(self):
        """Test that None on a regular field is not sent as null."""
        assert decode(JsonBody.from_model(Outer(title=None))) == {}

    def test_explicit_null_is_kept_for_nullable_fields(self):
        """Test that an explicitly set nullable field is sent as null."""
        assert decode(JsonBody.from_model(Outer(note=None))) == {'note': None}

    def test_unset_nullable_field_is_omitted(self):
        assert 'note' not in decode(JsonBody.from_model(Outer(title='t')))

    def test_nested_models_follow_the_same_rule(self):
        body = JsonBody.from_model(Outer(inner=Inner(name='n')))
        assert decode(body) == {'inner': {'name': 'n'}}

    def test_clear_manager(self):
        """Test the per-field distinction on the Ramp user patch."""
        assert decode(JsonBody.from_model(PatchUsersIdRequest(direct_manager_id=None))) == {
            'direct_manager_id': None
        }
        assert decode(JsonBody.from_model(PatchUsersIdRequest(location_id='loc-2'))) == {
            'location_id': 'loc-2'
        }

    def test_enums_serialize_by_value(self):
        body = JsonBody.from_model(
            PostUsersDeferredRequest(
                email='ada@example.com',
                first_name='Ada',
                last_name='Lovelace',
                role=UserRole.BUSINESS_ADMIN,
            )
        )
        assert decode(body) == {
            'email': 'ada@example.com',
            'first_name': 'Ada',
            'last_name': 'Lovelace',
            'role': 'BUSINESS_ADMIN',
        }

    def test_deleted_gist_file_is_sent_as_null(self):
        """Test that a file mapped to None stays in the files object."""
        request = GistsUpdateRequest(
            files={
                'old.txt': None,
                'keep.txt': GistFileUpdate(content='new content'),
            }
        )
        assert decode(JsonBody.from_model(request)) == {
            'files': {'old.txt': None, 'keep.txt': {'content': 'new content'}}
        }

    def test_unknown_response_fields_are_ignored(self):
        assert Inner.model_validate({'name': 'x', 'extra': 1}) == Inner(name='x')
