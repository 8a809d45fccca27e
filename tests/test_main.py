import logging

import pytest
from hydra import compose, initialize
from omegaconf import OmegaConf

from main import _get_logger, run_demo
from notifications.core.sinks import BufferSink
from notifications.errors import UnknownKind


@pytest.fixture
def cfg():
    with initialize(version_base=None, config_path="../config"):
        return compose(config_name="config")


def test_demo_sends_every_delivery(cfg):
    sink = BufferSink()
    created = run_demo(cfg, sink)

    assert [n.describe() for n in created] == [
        "EmailNotification (SMTP: smtp.mycompany.com)",
        "SMSNotification (Provider: Nexmo)",
        "PushNotification (AppId: com.example.app)",
        "SlackNotification (webhook: https://hooks.slack.com/services/ABC/DEF/XYZ)",
        "ConsoleLoggerNotification",
    ]
    assert sink.lines[0] == "[Email -> jose@example.com] via smtp.mycompany.com: Hello Jose! This is an email notification."
    assert sink.lines[-1] == "[ConsoleLogger] To: DevOps | Deployment completed successfully."
    assert len(sink.lines) == 5


def test_demo_overrides(cfg):
    cfg = OmegaConf.merge(
        cfg,
        {
            "factory": {"deliveries": []},
            "registry": {"deliveries": [{"kind": "slack", "recipient": "#ops", "message": "hi"}]},
            "runtime": {"slack_webhook": "https://hooks.example.com/x"},
        },
    )
    sink = BufferSink()
    run_demo(cfg, sink)

    assert sink.lines == ["[Slack -> #ops] webhook:https://hooks.example.com/x message:hi"]


def test_demo_unknown_kind_surfaces(cfg):
    cfg = OmegaConf.merge(
        cfg,
        {
            "factory": {"deliveries": []},
            "registry": {"deliveries": [{"kind": "pager", "recipient": "x", "message": "y"}]},
        },
    )
    with pytest.raises(UnknownKind):
        run_demo(cfg, BufferSink())


def test_unseeded_registry_still_has_runtime_kinds(cfg):
    cfg = OmegaConf.merge(cfg, {"registry": {"seed_defaults": False}})
    created = run_demo(cfg, BufferSink())

    assert created[-1].describe() == "ConsoleLoggerNotification"


def test_demo_accepts_lowercase_level_name(cfg):
    cfg = OmegaConf.merge(cfg, {"logging": {"level": "info"}})
    created = run_demo(cfg, BufferSink())

    assert len(created) == 5


def test_demo_logger_level_from_name():
    assert _get_logger("debug").level == logging.DEBUG
