import os


class TestAsgiEntry:
    def test_keeps_configured_settings(self):
        from apps.api.config import asgi

        assert os.environ["DJANGO_SETTINGS_MODULE"] == "apps.api.config.settings.test"
        assert asgi.BASE_DIR.joinpath("manage.py").exists()
        assert callable(asgi.application)
