from libur_api.schemas import HolidayType
from libur_api.services.classifier import classify


def test_national_holiday():
    assert classify("Libur Nasional Tahun Baru") == HolidayType.NATIONAL_HOLIDAY


def test_joint_leave():
    assert classify("Cuti Bersama Idul Fitri") == HolidayType.JOINT_LEAVE


def test_observance_is_default():
    assert classify("Hari Kartini") == HolidayType.OBSERVANCE
    assert classify("") == HolidayType.OBSERVANCE


def test_match_is_case_insensitive():
    assert classify("LIBUR NASIONAL Nyepi") == HolidayType.NATIONAL_HOLIDAY
    assert classify("cuti BERSAMA natal") == HolidayType.JOINT_LEAVE


def test_joint_leave_overrides_national_holiday():
    title = "Cuti Bersama setelah Libur Nasional Idul Fitri"
    assert classify(title) == HolidayType.JOINT_LEAVE


def test_wire_values():
    assert HolidayType.NATIONAL_HOLIDAY.value == "libur_nasional"
    assert HolidayType.JOINT_LEAVE.value == "cuti_bersama"
    assert HolidayType.OBSERVANCE.value == "hari_besar"
