import pytest

from ravedude.chips.atmega import UnknownMcuError
from ravedude.chips.attiny import pins
from ravedude.chips.attiny_adc import (
    TinyReferenceVoltage,
    adc_channels,
    adc_pins,
    reference_voltages,
)

ADC_MCUS = ("attiny85", "attiny88", "attiny167")


def test_reference_voltages_attiny88():
    assert reference_voltages("attiny88") == (
        TinyReferenceVoltage.AVcc,
        TinyReferenceVoltage.Internal1_1,
    )


def test_reference_voltages_attiny85_has_all():
    assert set(reference_voltages("attiny85")) == set(TinyReferenceVoltage)


@pytest.mark.parametrize("mcu", ADC_MCUS)
def test_avcc_always_available(mcu):
    assert TinyReferenceVoltage.AVcc in reference_voltages(mcu)


@pytest.mark.parametrize("mcu", ("attiny2313", "attiny84"))
def test_no_adc_raises(mcu):
    with pytest.raises(ValueError):
        adc_pins(mcu)
    with pytest.raises(ValueError):
        adc_channels(mcu)


def test_unknown_mcu_raises():
    with pytest.raises(UnknownMcuError):
        reference_voltages("nope")


def test_attiny85_first_adc_pin():
    first = adc_pins("attiny85")[0]
    assert first.pin.name == "PB5"
    assert first.mux == "ADC0"
    assert first.didr == "didr0::adc0d"


def test_attiny167_high_channels_use_didr1():
    last = adc_pins("attiny167")[-1]
    assert last.pin.name == "PB7"
    assert last.mux == "ADC10"
    assert last.didr.startswith("didr1::")


@pytest.mark.parametrize("mcu", ADC_MCUS)
def test_adc_pins_are_chip_pins_with_unique_mux(mcu):
    chip_pins = set(pins(mcu))
    entries = adc_pins(mcu)
    assert all(entry.pin in chip_pins for entry in entries)
    assert len({entry.mux for entry in entries}) == len(entries)


def test_channels():
    assert adc_channels("attiny167")["AVcc_4"] == "ADC_AVCC_4"
    assert "AVcc_4" not in adc_channels("attiny85")
    assert adc_channels("attiny88")["Temperature"] == "TEMPSENS"


def test_channels_returns_copy():
    channels = adc_channels("attiny85")
    channels.pop("Vbg")
    assert "Vbg" in adc_channels("attiny85")