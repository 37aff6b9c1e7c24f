from __future__ import annotations

import pytest

from mobile_assets.catalog import (
    IconVariant,
    PlatformSpec,
    SplashVariant,
    list_icon_platforms,
    list_splash_platforms,
)


def test_default_icon_catalog_is_android_launcher_set():
    platforms = list_icon_platforms()

    assert [p.name for p in platforms] == ["android"]
    android = platforms[0]
    assert android.is_added
    assert android.icons_path == "res/"
    assert [i.size for i in android.icons] == [36, 48, 72, 96, 144, 192]
    assert android.icons[0].name == "drawable-ldpi/ic_launcher.png"
    assert android.icons[-1].name == "drawable-xxxhdpi/ic_launcher.png"


def test_default_splash_catalog_is_empty():
    assert list_splash_platforms() == []


def test_catalog_is_built_fresh_per_call():
    first = list_icon_platforms()
    second = list_icon_platforms()
    assert first == second
    assert first is not second


def test_no_two_variants_share_a_destination():
    for platform in list_icon_platforms():
        names = [i.name for i in platform.icons]
        assert len(names) == len(set(names))


def test_custom_tables():
    icons = list_icon_platforms({
        "ios": {"path": "ios/icons", "added": False, "variants": [("Icon-60@2x.png", 120)]},
    })
    splash = list_splash_platforms({
        "android": {"path": "res/", "variants": [("drawable-land-hdpi/screen.png", 800, 480)]},
    })

    assert icons == [PlatformSpec("ios", icons_path="ios/icons", is_added=False,
                                  icons=(IconVariant("Icon-60@2x.png", 120),))]
    assert splash[0].is_added
    assert splash[0].splash == (SplashVariant("drawable-land-hdpi/screen.png", 800, 480),)


def test_format_comes_from_extension():
    assert IconVariant("a/b/icon.PNG", 10).format == "png"
    assert SplashVariant("screen.jpg", 10, 20).format == "jpg"


@pytest.mark.parametrize("name", ["", "/abs/icon.png", "drawable/ic_launcher", "../../x.png", "res/../../x.png"])
def test_rejects_bad_names(name):
    with pytest.raises(ValueError):
        IconVariant(name, 48)


@pytest.mark.parametrize("size", [0, -1, 1.5, True])
def test_rejects_bad_sizes(size):
    with pytest.raises(ValueError):
        IconVariant("icon.png", size)
    with pytest.raises(ValueError):
        SplashVariant("screen.png", size, 10)


def test_variants_are_immutable():
    icon = IconVariant("icon.png", 48)
    with pytest.raises(AttributeError):
        icon.size = 96
