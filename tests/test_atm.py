import pytest

from algokit.atm import ATM_NOTES, CURRENCY_NOTES, DEFAULT_BALANCE, Atm, note_breakdown


@pytest.mark.parametrize("amount", [0, 1, 99, 2584, 3875, 20000])
def test_breakdown_adds_up(amount):
    counts = note_breakdown(amount)
    assert sum(note * count for note, count in counts.items()) == amount


def test_breakdown_uses_largest_note_first():
    counts = note_breakdown(2000)
    assert counts[2000] == 1
    assert all(count == 0 for note, count in counts.items() if note != 2000)


def test_breakdown_leaves_remainder():
    counts = note_breakdown(350, ATM_NOTES)
    paid = sum(note * count for note, count in counts.items())
    assert 0 <= 350 - paid < min(ATM_NOTES)


def test_breakdown_keeps_denomination_order():
    assert list(note_breakdown(10)) == list(CURRENCY_NOTES)


def test_breakdown_rejects_negative():
    with pytest.raises(ValueError):
        note_breakdown(-5)


@pytest.fixture
def atm():
    pin = 4321
    machine = Atm(pin)
    assert machine.verify(pin)
    return machine


def test_wrong_pin_is_rejected():
    machine = Atm(4321)
    assert machine.verify(1234) is False
    with pytest.raises(PermissionError):
        machine.withdraw(100)


def test_withdraw_reduces_balance(atm):
    atm.withdraw(2500)
    assert atm.balance == DEFAULT_BALANCE - 2500


def test_withdraw_returns_notes(atm):
    notes = atm.withdraw(2700)
    assert sum(note * count for note, count in notes.items()) == 2700
    assert set(notes) == set(ATM_NOTES)


def test_insufficient_balance(atm):
    with pytest.raises(ValueError):
        atm.withdraw(DEFAULT_BALANCE + 1)
    assert atm.balance == DEFAULT_BALANCE