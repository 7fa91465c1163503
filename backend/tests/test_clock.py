from datetime import datetime

from tracker.services.game.clock import format_clock_time, time_formatter


def _ms(*args):
    return datetime(*args).timestamp() * 1000.0


def test_twelve_hour_time_has_no_leading_zero():
    assert format_clock_time(_ms(2024, 3, 1, 7, 45, 2)) == datetime(2024, 3, 1, 7, 45, 2).strftime('7:%M:%S %p')


def test_two_digit_hour_is_kept():
    assert format_clock_time(_ms(2024, 3, 1, 23, 5, 9)).startswith('11:05:09')


def test_custom_format_is_untouched():
    fmt = time_formatter('%H:%M:%S')
    assert fmt(_ms(2024, 3, 1, 7, 5, 9)) == '07:05:09'
