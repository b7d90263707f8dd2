from l10nchain.types import (
    L10nAttribute,
    L10nKey,
    L10nMessage,
    ResourceId,
    ResourceType,
    to_resource_id,
)


def test_resource_id_defaults_to_required():
    res = ResourceId("test.ftl")
    assert res.resource_type is ResourceType.REQUIRED
    assert res.is_required()
    assert not res.is_optional()


def test_to_resource_id_optional():
    res = to_resource_id("test2.ftl", ResourceType.OPTIONAL)
    assert res.value == "test2.ftl"
    assert res.is_optional()
    assert not res.is_required()


def test_equality_ignores_resource_type():
    required = ResourceId("test.ftl")
    optional = to_resource_id("test.ftl", ResourceType.OPTIONAL)
    assert required == optional
    assert hash(required) == hash(optional)
    assert len({required, optional}) == 1


def test_equality_with_string():
    res = ResourceId("test.ftl")
    assert res == "test.ftl"
    assert not (res == "other.ftl")


def test_different_values_differ():
    assert ResourceId("a.ftl") != ResourceId("b.ftl")


def test_str_is_value():
    assert str(ResourceId("test.ftl")) == "test.ftl"


def test_l10n_key_defaults():
    key = L10nKey("hello-world")
    assert key.id == "hello-world"
    assert key.args is None


def test_l10n_key_with_args():
    key = L10nKey("message-4", {"userName": "John"})
    assert key.args["userName"] == "John"


def test_l10n_message_defaults():
    msg = L10nMessage(None)
    assert msg.value is None
    assert msg.attributes == []


def test_l10n_message_attributes():
    attr = L10nAttribute("title", "Hello")
    msg = L10nMessage("Value", [attr])
    assert msg.attributes[0].name == "title"
    assert msg.attributes[0].value == "Hello"