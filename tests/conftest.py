"""Shared fixtures for the catalogue tests."""

from pathlib import Path

import pytest

from tscat.core.i18n import I18N
from tscat.infra.ts_reader import parse_catalogue, read_catalogue

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGED_TS = REPO_ROOT / "tscat" / "locales" / "mythbrowser_hu.ts"

SAMPLE_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS><TS version="2.1" language="de_DE" sourcelanguage="en">
<context>
    <name>BrowserConfig</name>
    <message>
        <location filename="../mythbrowser/bookmarkmanager.cpp" line="63"/>
        <source>Ok</source>
        <translation>OK</translation>
    </message>
    <message>
        <location filename="../mythbrowser/bookmarkmanager.cpp" line="64"/>
        <source>Cancel</source>
        <translation type="unfinished">Abbrechen</translation>
    </message>
    <message>
        <source>Open %URL% at %ZOOM%</source>
        <translation>%URL% mit %ZOOM% öffnen</translation>
    </message>
    <message>
        <source>Open</source>
        <comment>menu</comment>
        <translation>Öffnen (Menü)</translation>
    </message>
    <message>
        <source>Open</source>
        <translation>Öffnen</translation>
    </message>
    <message>
        <source>Old entry</source>
        <translation type="obsolete">Alter Eintrag</translation>
    </message>
    <message>
        <source>Empty finished</source>
        <translation></translation>
    </message>
</context>
<context>
    <name>WebPage</name>
    <message>
        <location filename="../mythbrowser/webpage.cpp" line="129"/>
        <source>Loading...</source>
        <extracomment>Shown in the tab title</extracomment>
        <translatorcomment>Keep it short</translatorcomment>
        <translation>Lädt...</translation>
    </message>
</context>
</TS>
"""


@pytest.fixture(autouse=True)
def reset_registry():
    I18N.reset()
    yield
    I18N.reset()


@pytest.fixture
def packaged_path() -> Path:
    return PACKAGED_TS


@pytest.fixture
def hu_catalogue():
    return read_catalogue(PACKAGED_TS)


@pytest.fixture
def sample_catalogue():
    return parse_catalogue(SAMPLE_TS)


@pytest.fixture
def sample_file(tmp_path) -> Path:
    path = tmp_path / "mythbrowser_de.ts"
    path.write_text(SAMPLE_TS, encoding="utf-8")
    return path


NUMERUS_TS = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS><TS version="2.1" language="hu_HU">
<context>
    <name>MythBrowser</name>
    <message numerus="yes">
        <source>%n bookmark(s)</source>
        <translation>
            <numerusform>%n könyvjelző</numerusform>
        </translation>
    </message>
    <message numerus="yes">
        <source>%n tab(s)</source>
        <translation type="unfinished">
            <numerusform></numerusform>
        </translation>
    </message>
</context>
</TS>
"""


@pytest.fixture
def numerus_catalogue():
    return parse_catalogue(NUMERUS_TS)
