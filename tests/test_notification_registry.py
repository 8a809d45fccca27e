import pytest

from notifications.channels import WebhookNotification
from notifications.errors import InvalidConfiguration, UnknownKind
from notifications.registry import create_default_registry, get_registry, register_notification


def test_default_registry_is_seeded(registry):
    assert registry.keys() == ("email", "push", "sms")


def test_registry_can_start_empty():
    registry = create_default_registry(seed_defaults=False)

    assert len(registry) == 0
    with pytest.raises(UnknownKind):
        registry.create("email", {})


def test_email_default_and_override(registry):
    assert "smtp.example.com" in registry.create("email", {}).describe()
    assert "a.b.com" in registry.create("email", {"smtp": "a.b.com"}).describe()


def test_sms_with_provider(registry):
    assert "Nexmo" in registry.create("sms", {"provider": "Nexmo"}).describe()


def test_seeded_builders_use_registry_sink(registry, sink):
    registry.create("PUSH", {"appId": "org.demo"}).send("user-1", "ping")

    assert sink.lines == ["[Push -> user-1] (AppId:org.demo): ping"]


def test_runtime_registered_slack(registry):
    registry.register(
        "slack",
        lambda cfg: WebhookNotification(cfg.get("webhook", "https://hooks.slack.com/default"), label="Slack"),
    )
    slack = registry.create("slack", {"webhook": "https://hooks.slack.com/services/ABC"})

    assert "https://hooks.slack.com/services/ABC" in slack.describe()


def test_unknown_kind(registry):
    with pytest.raises(UnknownKind) as excinfo:
        registry.create("unknown-kind", {})
    assert excinfo.value.key == "unknown-kind"


def test_builder_failure_is_not_translated(registry):
    registry.register("hook", WebhookNotification.from_config)

    with pytest.raises(InvalidConfiguration):
        registry.create("hook", {"webhook": "not-a-url"})


def test_override_builtin_kind(registry, sink):
    registry.register("email", lambda cfg: WebhookNotification(label="Mail", sink=sink))

    assert registry.create("email", {}).describe().startswith("MailNotification")


def test_process_registry_is_a_singleton():
    assert get_registry() is get_registry()
    assert "email" in get_registry()


def test_register_notification_decorator_defaults_to_process_registry():
    @register_notification("Teams")
    def build_teams(cfg):
        return WebhookNotification.from_config(cfg, label="Teams")

    assert build_teams({}).label == "Teams"
    assert get_registry().create("teams", {}).describe().startswith("TeamsNotification")


def test_register_notification_decorator_with_explicit_registry(registry):
    @register_notification("hook", registry=registry)
    def build_hook(cfg):
        return WebhookNotification.from_config(cfg)

    assert "hook" in registry
    assert "hook" not in get_registry()
