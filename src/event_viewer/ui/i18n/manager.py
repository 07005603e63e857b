from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QCoreApplication, QLocale, QTranslator

from event_viewer.utils import get_logger


logger = get_logger(__name__)

CATALOG_DOMAIN = "event_viewer"
DEFAULT_CATALOG_DIR = Path(__file__).resolve().parent.parent / "translations"


class TranslationManager:
    """Install the viewer's Qt catalog for the requested UI locale.

    Catalogs are named ``event_viewer_<locale>.qm`` and carry the ``DeviceViews``
    and ``EventTypes`` contexts. Qt resolves the locale, so ``zh_CN`` also
    matches ``event_viewer_zh.qm``. Without a match the English source strings
    stay in place.
    """

    def __init__(
        self,
        app: QCoreApplication,
        *,
        catalog_dir: Path | None = None,
        domain: str = CATALOG_DOMAIN,
    ) -> None:
        self._app = app
        self._catalog_dir = catalog_dir or DEFAULT_CATALOG_DIR
        self._domain = domain
        self._translator: QTranslator | None = None

    @property
    def installed_locale(self) -> str | None:
        if self._translator is None:
            return None
        return self._translator.language() or None

    def load(self, locale: QLocale | str | None = None) -> bool:
        """Replace the installed catalog with the best match for ``locale``.

        ``None`` or an empty string selects the system locale. Returns True
        when a catalog was installed.
        """

        if isinstance(locale, QLocale):
            target = locale
        elif locale:
            target = QLocale(locale)
        else:
            target = QLocale.system()

        self.unload()
        translator = QTranslator(self._app)
        if not translator.load(target, self._domain, "_", str(self._catalog_dir), ".qm"):
            logger.debug(
                "No translation catalog for locale; using source strings",
                locale=target.name(),
                directory=str(self._catalog_dir),
            )
            return False

        QCoreApplication.installTranslator(translator)
        self._translator = translator
        logger.info(
            "Loaded translation",
            locale=translator.language(),
            path=translator.filePath(),
        )
        return True

    def unload(self) -> None:
        if self._translator is not None:
            QCoreApplication.removeTranslator(self._translator)
            self._translator = None

    def available_locales(self) -> list[str]:
        if not self._catalog_dir.is_dir():
            return []
        prefix = f"{self._domain}_"
        return sorted(
            path.stem.removeprefix(prefix)
            for path in self._catalog_dir.glob(f"{prefix}*.qm")
        )


__all__ = ["CATALOG_DOMAIN", "TranslationManager"]
