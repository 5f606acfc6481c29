import pytest

from ravedude.chips.atmega import UnknownMcuError, supported_mcus
from ravedude.chips.atmega_adc import (
    AdcSettings,
    ClockDivider,
    ReferenceVoltage,
    adc_channels,
    adc_pins,
)
from ravedude.chips.atmega_ports import Pin, pins


def test_default_settings():
    settings = AdcSettings()
    assert settings.ref_voltage is ReferenceVoltage.AVcc
    assert settings.clock_divider in tuple(ClockDivider)


def test_settings_accept_enum_values():
    settings = AdcSettings(ClockDivider(4), ReferenceVoltage("aref"))
    assert settings.clock_divider is ClockDivider.Factor4
    assert settings.ref_voltage is ReferenceVoltage.Aref


def test_invalid_settings_rejected():
    with pytest.raises(ValueError):
        AdcSettings(clock_divider=3)


@pytest.mark.parametrize("mcu", supported_mcus())
def test_adc_pins_exist_on_chip(mcu):
    available = set(pins(mcu))
    for entry in adc_pins(mcu):
        assert entry.pin in available


@pytest.mark.parametrize("mcu", supported_mcus())
def test_mux_values_unique(mcu):
    muxes = [entry.mux for entry in adc_pins(mcu)]
    muxes += list(adc_channels(mcu, extra_adc=True).values())
    assert len(muxes) == len(set(muxes))


def test_atmega328p_pins():
    entries = adc_pins("atmega328p")
    assert [e.pin.name for e in entries] == ["PC0", "PC1", "PC2", "PC3", "PC4", "PC5"]
    assert entries[0].mux == "ADC0"
    assert entries[0].didr == "didr0::adc0d"


def test_mega_upper_channels_use_didr2():
    entries = {e.pin: e for e in adc_pins("atmega2560")}
    assert len(entries) == 16
    assert entries[Pin.parse("PK0")].mux == 0b100000
    assert entries[Pin.parse("PK0")].didr == "didr2::adc8d"
    assert entries[Pin.parse("PF7")].didr == "didr0::adc7d"


def test_atmega32u4_pin_didr():
    entries = {e.pin.name: e for e in adc_pins("atmega32u4")}
    assert entries["PD4"].didr == "didr2::adc8d"
    assert entries["PB6"].mux == 0b100101


def test_atmega8_has_no_didr():
    assert all(e.didr is None for e in adc_pins("atmega8"))


def test_temperature_channel_availability():
    assert "Temperature" not in adc_channels("atmega168")
    assert adc_channels("atmega328p")["Temperature"] == "TEMPSENS"
    assert adc_channels("atmega32u4")["Temperature"] == 0b100111


def test_extra_adc_channels():
    assert "ADC6" not in adc_channels("atmega168")
    extra = adc_channels("atmega168", extra_adc=True)
    assert extra["ADC6"] == "ADC6" and extra["ADC7"] == "ADC7"
    assert adc_channels("atmega2560", extra_adc=True) == adc_channels("atmega2560")
    assert adc_channels("atmega128a", extra_adc=True) == adc_channels("atmega128a")


def test_mega_raw_channels():
    assert adc_channels("atmega1280") == {"Vbg": 0b011110, "Gnd": 0b011111}


@pytest.mark.parametrize("mcu", supported_mcus())
def test_every_chip_has_vbg_and_gnd(mcu):
    channels = adc_channels(mcu)
    assert {"Vbg", "Gnd"} <= set(channels)


def test_unknown_mcu():
    with pytest.raises(UnknownMcuError):
        adc_pins("atmega9999")
    with pytest.raises(UnknownMcuError):
        adc_channels("attiny85")