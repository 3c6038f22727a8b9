from pyoutline.services.settings_service import SettingsService


def test_settings_roundtrip_geometry(settings_service: SettingsService):
    blob = b"\x01\x02\x03"
    settings_service.set_geometry(blob)
    got = settings_service.get_geometry()
    assert isinstance(got, (bytes, bytearray))
    assert bytes(got) == blob


def test_settings_hide_completed(settings_service: SettingsService):
    assert settings_service.get_hide_completed() is False
    assert settings_service.get_hide_completed(default=True) is True
    settings_service.set_hide_completed(True)
    assert settings_service.get_hide_completed() is True
    settings_service.set_hide_completed(False)
    assert settings_service.get_hide_completed(default=True) is False


def test_settings_hide_completed_survives_reopen(tmp_settings_path, qsettings):
    SettingsService(qsettings).set_hide_completed(True)
    qsettings.sync()

    from PyQt6.QtCore import QSettings

    reopened = SettingsService(QSettings(str(tmp_settings_path), QSettings.Format.IniFormat))
    assert reopened.get_hide_completed() is True


def test_settings_recent_exports(settings_service: SettingsService):
    assert settings_service.get_recent_exports() == []  # default
    settings_service.set_recent_exports(["a.md"])
    assert settings_service.get_recent_exports() == ["a.md"]
    r = ["a.md", "b.html"]
    settings_service.set_recent_exports(r)
    assert settings_service.get_recent_exports() == r


def test_settings_raw_roundtrip(settings_service: SettingsService):
    assert settings_service.get_raw("x/y", "dflt") == "dflt"
    settings_service.set_raw("x/y", '[{"id": "a", "text": "b, c"}]')
    assert settings_service.get_raw("x/y") == '[{"id": "a", "text": "b, c"}]'
