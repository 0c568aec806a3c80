"""Unit tests for webhook validation and storage.

Pure function tests - no mocks needed.
"""

import pytest

from slack_relay.core.webhooks import (
    INVALID_WEBHOOK_MESSAGE,
    InvalidWebhookError,
    WebhookSet,
    normalize_webhooks,
    validate_webhooks,
)


URL_A = "https://hooks.slack.com/services/T000/B000/aaaa"
URL_B = "https://hooks.slack.com/services/T000/B000/bbbb"
URL_C = "https://hooks.slack.com/services/T000/B000/cccc"


class TestValidateWebhooks:
    """Tests for validate_webhooks() function."""

    def test_accepts_string(self):
        assert validate_webhooks(URL_A) is True

    def test_accepts_list_of_strings(self):
        assert validate_webhooks([URL_A, URL_B]) is True

    def test_accepts_tuple_of_strings(self):
        assert validate_webhooks((URL_A,)) is True

    def test_accepts_empty_list(self):
        """An empty list trivially contains only strings."""
        assert validate_webhooks([]) is True

    def test_rejects_empty_string(self):
        with pytest.raises(InvalidWebhookError):
            validate_webhooks("")

    @pytest.mark.parametrize("value", [None, 42, 3.5, True, {"url": URL_A}, {URL_A}])
    def test_rejects_non_string_scalars(self, value):
        with pytest.raises(InvalidWebhookError) as exc_info:
            validate_webhooks(value)
        assert exc_info.value.value == value

    def test_rejects_list_with_non_string(self):
        with pytest.raises(InvalidWebhookError) as exc_info:
            validate_webhooks([URL_A, 42])
        assert exc_info.value.value == 42

    def test_rejects_list_with_empty_string(self):
        with pytest.raises(InvalidWebhookError):
            validate_webhooks([URL_A, ""])

    def test_error_message_names_accepted_types(self):
        with pytest.raises(InvalidWebhookError) as exc_info:
            validate_webhooks(42)
        assert str(exc_info.value).startswith(INVALID_WEBHOOK_MESSAGE)
        assert "42" in str(exc_info.value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_webhooks(42)


class TestNormalizeWebhooks:
    """Tests for normalize_webhooks() function."""

    def test_string_becomes_single_item_list(self):
        assert normalize_webhooks(URL_A) == [URL_A]

    def test_list_is_copied(self):
        original = [URL_A, URL_B]
        result = normalize_webhooks(original)

        original.append(URL_C)

        assert result == [URL_A, URL_B]

    def test_values_are_not_normalized(self):
        """Whitespace and case are kept exactly."""
        assert normalize_webhooks(" HTTPS://Example.com/x ") == [" HTTPS://Example.com/x "]


class TestWebhookSetInit:
    """Tests for WebhookSet initialization."""

    def test_none_gives_empty_set(self):
        assert WebhookSet().snapshot() == []

    def test_string(self):
        assert WebhookSet(URL_A).snapshot() == [URL_A]

    def test_list(self):
        assert WebhookSet([URL_A, URL_B]).snapshot() == [URL_A, URL_B]

    def test_caller_list_is_not_aliased(self):
        urls = [URL_A]
        webhooks = WebhookSet(urls)

        urls.append(URL_B)

        assert webhooks.snapshot() == [URL_A]

    def test_invalid_input_raises(self):
        with pytest.raises(InvalidWebhookError):
            WebhookSet(42)

    def test_snapshot_is_a_copy(self):
        webhooks = WebhookSet(URL_A)
        snapshot = webhooks.snapshot()

        snapshot.append(URL_B)

        assert webhooks.snapshot() == [URL_A]

    def test_len_and_iter(self):
        webhooks = WebhookSet([URL_A, URL_B])
        assert len(webhooks) == 2
        assert list(webhooks) == [URL_A, URL_B]


class TestWebhookSetAdd:
    """Tests for WebhookSet.add()."""

    def test_adds_string(self):
        webhooks = WebhookSet(URL_A).add(URL_B)
        assert webhooks.snapshot() == [URL_A, URL_B]

    def test_adds_list_in_order(self):
        webhooks = WebhookSet(URL_A).add([URL_C, URL_B])
        assert webhooks.snapshot() == [URL_A, URL_C, URL_B]

    def test_allows_duplicates(self):
        webhooks = WebhookSet(URL_A).add(URL_A)
        assert webhooks.snapshot() == [URL_A, URL_A]

    def test_invalid_string_leaves_set_unchanged(self):
        webhooks = WebhookSet(URL_A)

        with pytest.raises(InvalidWebhookError):
            webhooks.add(42)

        assert webhooks.snapshot() == [URL_A]

    def test_invalid_list_adds_nothing(self):
        """Valid elements before the invalid one are not added either."""
        webhooks = WebhookSet(URL_A)

        with pytest.raises(InvalidWebhookError):
            webhooks.add([URL_B, 42, True])

        assert webhooks.snapshot() == [URL_A]


class TestWebhookSetReplace:
    """Tests for WebhookSet.replace()."""

    def test_replaces_with_string(self):
        webhooks = WebhookSet(URL_A).replace(URL_B)
        assert webhooks.snapshot() == [URL_B]

    def test_replaces_with_list(self):
        webhooks = WebhookSet(URL_A).replace([URL_B, URL_C])
        assert webhooks.snapshot() == [URL_B, URL_C]

    def test_chained_replace_keeps_last(self):
        webhooks = WebhookSet().replace(URL_A).replace(URL_B)
        assert webhooks.snapshot() == [URL_B]

    def test_invalid_input_leaves_set_empty(self):
        """The set is cleared before the new input is validated."""
        webhooks = WebhookSet([URL_A, URL_B])

        with pytest.raises(InvalidWebhookError):
            webhooks.replace([42, URL_C])

        assert webhooks.snapshot() == []


class TestWebhookSetRemove:
    """Tests for WebhookSet.remove()."""

    def test_removes_string(self):
        webhooks = WebhookSet([URL_A, URL_B]).remove(URL_A)
        assert webhooks.snapshot() == [URL_B]

    def test_removes_all_duplicates(self):
        webhooks = WebhookSet([URL_A, URL_B, URL_A]).remove(URL_A)
        assert webhooks.snapshot() == [URL_B]

    def test_removes_list(self):
        webhooks = WebhookSet([URL_A, URL_B, URL_C]).remove([URL_A, URL_C])
        assert webhooks.snapshot() == [URL_B]

    def test_missing_value_is_noop(self):
        webhooks = WebhookSet(URL_A).remove(URL_B)
        assert webhooks.snapshot() == [URL_A]

    def test_is_idempotent(self):
        webhooks = WebhookSet([URL_A, URL_B])

        webhooks.remove(URL_A)
        after_first = webhooks.snapshot()
        webhooks.remove(URL_A)

        assert webhooks.snapshot() == after_first == [URL_B]

    def test_ignores_non_strings(self):
        webhooks = WebhookSet(URL_A).remove(42)
        assert webhooks.snapshot() == [URL_A]

    def test_list_with_non_string_still_removes_strings(self):
        webhooks = WebhookSet([URL_A, URL_B]).remove([URL_A, 42])
        assert webhooks.snapshot() == [URL_B]

    def test_add_then_remove_restores_original(self):
        webhooks = WebhookSet([URL_A])
        webhooks.add(URL_B).remove(URL_B)
        assert webhooks.snapshot() == [URL_A]
