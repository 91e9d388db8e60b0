import pytest

from giveaway.config import Config


def test_defaults_are_valid(monkeypatch):
    monkeypatch.setattr(Config, "REVEAL_DELAY", "1.5")
    monkeypatch.setattr(Config, "RANDOM_SEED", None)

    Config.validate()

    assert Config.reveal_delay() == 1.5
    assert Config.random_seed() is None


def test_seed_is_parsed(monkeypatch):
    monkeypatch.setattr(Config, "RANDOM_SEED", " 42 ")

    assert Config.random_seed() == 42


@pytest.mark.parametrize(
    "delay, seed",
    [("-1", None), ("soon", None), ("nan", None), ("inf", None), ("1", "abc")],
)
def test_invalid_values_are_rejected(monkeypatch, delay, seed):
    monkeypatch.setattr(Config, "REVEAL_DELAY", delay)
    monkeypatch.setattr(Config, "RANDOM_SEED", seed)

    with pytest.raises(ValueError):
        Config.validate()


def test_service_rejects_non_finite_delay():
    from giveaway.services.giveaway import GiveawayService

    with pytest.raises(ValueError):
        GiveawayService(reveal_delay=float("nan"))
    with pytest.raises(ValueError):
        GiveawayService(reveal_delay=float("inf"))
