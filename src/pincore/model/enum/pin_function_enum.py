from enum import StrEnum


class PinFunction(StrEnum):
    """
    Electrical capability of a physical pin:
    GND: ground
    VCC: supply voltage
    GPIO: digital input/output
    ADC: analog input
    I2C_SDA / I2C_SCL: I2C bus data / clock
    """

    GND = "GND"
    VCC = "VCC"
    GPIO = "GPIO"
    ADC = "ADC"
    I2C_SDA = "I2C_SDA"
    I2C_SCL = "I2C_SCL"
