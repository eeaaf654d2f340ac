"""Unit tests for the frontend adapters."""

from access.adapter.frontend import (
    InMemoryFlashMessenger,
    InMemoryNavigator,
    MessageCatalog,
)
from access.domain.value import Authority


class TestMessageCatalog:
    """Tests for MessageCatalog."""

    def test_every_authority_has_a_label(self):
        catalog = MessageCatalog()
        for authority in Authority:
            key = f"access.{authority.value}"
            assert catalog.translate(key) != key

    def test_formats_arguments(self):
        catalog = MessageCatalog()
        text = catalog.translate("invitations.roleExpiryDateInfo", expiry="2027-03-01")
        assert text == "The role expires on 2027-03-01"

    def test_missing_key_is_returned(self):
        assert MessageCatalog().translate("missing.key") == "missing.key"

    def test_custom_messages(self):
        catalog = MessageCatalog({"roles.multiple": "Meerdere applicaties"})
        assert catalog.translate("roles.multiple") == "Meerdere applicaties"
        assert catalog.translate("access.GUEST") == "access.GUEST"


class TestInMemoryNavigator:
    """Tests for InMemoryNavigator."""

    def test_records_history(self):
        navigator = InMemoryNavigator()
        assert navigator.current is None

        navigator.go_to("/roles/1/invitations")
        navigator.go_back()

        assert navigator.history == ["/roles/1/invitations", ".."]
        assert navigator.current == ".."


class TestInMemoryFlashMessenger:
    def test_records_messages(self):
        flash = InMemoryFlashMessenger()
        flash.flash("Invitations have been sent")
        assert flash.messages == ["Invitations have been sent"]
