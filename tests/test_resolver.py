"""Tests for resolver.py."""

from pathlib import Path

import pytest

from styleswitch.constants import FileType
from styleswitch.errors import UnsupportedFileType
from styleswitch.resolver import (
    CreateCompanion,
    NoCompanionFound,
    OpenCandidate,
    Placement,
    ResolutionConfig,
    check_supported,
    default_companion_name,
    fallback_candidates,
    find_candidates,
    resolve,
    select_next,
    target_column,
)

WIDGETS = Path("/project/src/widgets")


class TestResolutionConfig:
    def test_defaults(self):
        config = ResolutionConfig()
        assert config.style_extension == ".css"
        assert config.script_extension == ".js"
        assert config.use_directory_name is True
        assert config.use_other_column is False
        assert config.placement is Placement.CURRENT

    def test_from_options_none(self):
        assert ResolutionConfig.from_options(None) == ResolutionConfig()

    def test_from_options_host_names(self):
        config = ResolutionConfig.from_options({
            "cssCompanionExtension": ".scss",
            "jsCompanionExtension": ".tsx",
            "useDirectoryName": False,
            "useOtherColumn": True,
        })
        assert config == ResolutionConfig(".scss", ".tsx", False, True)
        assert config.placement is Placement.OTHER

    def test_from_options_snake_case(self):
        config = ResolutionConfig.from_options({"css_companion_extension": ".less"})
        assert config.style_extension == ".less"

    def test_empty_extension_defaults(self):
        config = ResolutionConfig.from_options({"cssCompanionExtension": ""})
        assert config.style_extension == ".css"

    def test_directory_name_only_disabled_by_false(self):
        assert ResolutionConfig.from_options({"useDirectoryName": None}).use_directory_name
        assert ResolutionConfig.from_options({"useDirectoryName": 0}).use_directory_name
        assert not ResolutionConfig.from_options({"useDirectoryName": False}).use_directory_name

    def test_other_column_only_enabled_by_true(self):
        assert not ResolutionConfig.from_options({"useOtherColumn": "yes"}).use_other_column
        assert not ResolutionConfig.from_options({"useOtherColumn": 1}).use_other_column
        assert ResolutionConfig.from_options({"useOtherColumn": True}).use_other_column

    def test_unknown_keys_ignored(self):
        assert ResolutionConfig.from_options({"colour": "blue"}) == ResolutionConfig()

    def test_extension_without_dot_rejected(self):
        with pytest.raises(ValueError, match="must start with '.'"):
            ResolutionConfig(style_extension="css")

    def test_non_string_extension_rejected(self):
        with pytest.raises(ValueError, match="must be a string"):
            ResolutionConfig.from_options({"jsCompanionExtension": 5})

    def test_frozen(self):
        config = ResolutionConfig()
        with pytest.raises(AttributeError):
            config.style_extension = ".scss"


class TestFindCandidates:
    def test_matches_opposite_type_only(self):
        siblings = ["app.ts", "app.css", "app.test.ts"]
        assert find_candidates("app.ts", siblings, FileType.SCRIPT) == ["app.css"]

    def test_never_includes_current_file(self):
        siblings = ["app.css", "app.ts"]
        assert "app.css" not in find_candidates("app.css", siblings, FileType.STYLE)

    def test_preserves_listing_order(self):
        siblings = ["app.scss", "app.ts", "app.css", "app.module.scss"]
        assert find_candidates("app.ts", siblings, FileType.SCRIPT) == [
            "app.scss", "app.css", "app.module.scss",
        ]

    def test_base_name_must_match_exactly(self):
        siblings = ["app.ts", "apple.css", "app-theme.css"]
        assert find_candidates("app.ts", siblings, FileType.SCRIPT) == []

    def test_unknown_siblings_ignored(self):
        siblings = ["app.ts", "app.json", "app.md"]
        assert find_candidates("app.ts", siblings, FileType.SCRIPT) == []

    def test_dotfile_has_no_candidates(self):
        assert find_candidates(".css", [".css", ".js"], FileType.STYLE) == []

    def test_style_finds_scripts(self):
        siblings = ["button.jsx", "button.module.scss", "button.stories.tsx"]
        assert find_candidates("button.module.scss", siblings, FileType.STYLE) == [
            "button.jsx", "button.stories.tsx",
        ]


class TestFallbackCandidates:
    def test_index_script_finds_directory_styles(self):
        siblings = ["index.tsx", "widgets.scss"]
        assert fallback_candidates("index.tsx", "widgets", siblings, FileType.SCRIPT) == [
            "widgets.scss",
        ]

    def test_collects_all_in_extension_order(self):
        siblings = ["index.tsx", "widgets.css", "widgets.less", "widgets.module.scss"]
        assert fallback_candidates("index.tsx", "widgets", siblings, FileType.SCRIPT) == [
            "widgets.module.scss", "widgets.css", "widgets.less",
        ]

    def test_non_index_script_has_no_fallback(self):
        siblings = ["button.tsx", "widgets.scss"]
        assert fallback_candidates("button.tsx", "widgets", siblings, FileType.SCRIPT) == []

    def test_index_name_is_case_sensitive(self):
        siblings = ["Index.tsx", "widgets.scss"]
        assert fallback_candidates("Index.tsx", "widgets", siblings, FileType.SCRIPT) == []

    def test_style_finds_index_scripts(self):
        siblings = ["index.ts", "index.js", "widgets.css"]
        assert fallback_candidates("widgets.css", "widgets", siblings, FileType.STYLE) == [
            "index.js", "index.ts",
        ]

    def test_style_does_not_find_directory_named_scripts(self):
        siblings = ["widgets.css", "widgets.js"]
        assert fallback_candidates("theme.css", "widgets", siblings, FileType.STYLE) == []

    def test_empty_directory_name(self):
        assert fallback_candidates("index.js", "", ["index.js", ".css"], FileType.SCRIPT) == []


class TestSelectNext:
    def test_first_candidate_after_current(self):
        siblings = ["a.css", "a.js", "a.scss"]
        assert select_next(["a.css", "a.scss"], "a.js", siblings) == "a.scss"

    def test_wraps_to_earliest(self):
        siblings = ["a.css", "a.scss", "a.ts"]
        assert select_next(["a.css", "a.scss"], "a.ts", siblings) == "a.css"

    def test_wrap_uses_listing_order_not_sequence_order(self):
        siblings = ["w.css", "w.module.scss", "z.ts"]
        assert select_next(["w.module.scss", "w.css"], "z.ts", siblings) == "w.css"

    def test_current_absent_from_listing(self):
        assert select_next(["b.css", "a.css"], "x.ts", ["a.css", "b.css"]) == "a.css"

    def test_empty_candidates_raises(self):
        with pytest.raises(ValueError):
            select_next([], "a.ts", ["a.ts"])

    def test_cycles_through_every_candidate_once(self):
        siblings = ["a.css", "a.less", "a.scss", "a.ts", "b.ts"]
        candidates = ["a.css", "a.less", "a.scss"]
        seen = []
        current = "a.ts"
        for _ in range(len(candidates)):
            current = select_next(candidates, current, siblings)
            seen.append(current)
        assert sorted(seen) == sorted(candidates)
        assert select_next(candidates, current, siblings) == seen[0]


class TestDefaultCompanionName:
    def test_script(self):
        assert default_companion_name(
            "button.js", "widgets", FileType.SCRIPT, ResolutionConfig(),
        ) == "button.css"

    def test_index_script_uses_directory_name(self):
        assert default_companion_name(
            "index.tsx", "widgets", FileType.SCRIPT, ResolutionConfig(),
        ) == "widgets.css"

    def test_index_script_without_directory_mode(self):
        config = ResolutionConfig(use_directory_name=False)
        assert default_companion_name(
            "index.tsx", "widgets", FileType.SCRIPT, config,
        ) == "index.css"

    def test_custom_style_extension(self):
        config = ResolutionConfig(style_extension=".module.scss")
        assert default_companion_name(
            "card.tsx", "widgets", FileType.SCRIPT, config,
        ) == "card.module.scss"

    def test_style(self):
        assert default_companion_name(
            "theme.scss", "widgets", FileType.STYLE, ResolutionConfig(),
        ) == "theme.js"

    def test_directory_named_style_proposes_index(self):
        config = ResolutionConfig(script_extension=".tsx")
        assert default_companion_name(
            "widgets.scss", "widgets", FileType.STYLE, config,
        ) == "index.tsx"

    def test_dotfile(self):
        assert default_companion_name(".css", "widgets", FileType.STYLE, ResolutionConfig()) is None


class TestResolve:
    def test_direct_match(self):
        result = resolve(WIDGETS / "app.ts", ["app.ts", "app.css", "app.test.ts"])
        assert result == OpenCandidate(path=WIDGETS / "app.css")

    def test_accepts_string_path(self):
        result = resolve(str(WIDGETS / "app.ts"), ["app.ts", "app.css"], ResolutionConfig())
        assert isinstance(result, OpenCandidate)
        assert result.path == WIDGETS / "app.css"

    def test_index_directory_fallback(self):
        result = resolve(WIDGETS / "index.tsx", ["index.tsx", "widgets.scss"])
        assert result == OpenCandidate(path=WIDGETS / "widgets.scss")

    def test_direct_match_beats_fallback(self):
        result = resolve(WIDGETS / "index.tsx", ["index.css", "index.tsx", "widgets.scss"])
        assert result == OpenCandidate(path=WIDGETS / "index.css")

    def test_fallback_disabled(self):
        config = ResolutionConfig(use_directory_name=False)
        result = resolve(WIDGETS / "index.tsx", ["index.tsx", "widgets.scss"], config)
        assert result == CreateCompanion("index.css", WIDGETS)

    def test_style_falls_back_to_index(self):
        result = resolve(WIDGETS / "widgets.scss", ["index.tsx", "widgets.scss"])
        assert result == OpenCandidate(path=WIDGETS / "index.tsx")

    def test_create_companion(self):
        result = resolve(WIDGETS / "button.js", ["button.js"])
        assert result == CreateCompanion("button.css", WIDGETS)
        assert result.default_path == WIDGETS / "button.css"

    def test_create_from_index_uses_directory_name(self):
        result = resolve(WIDGETS / "index.js", ["index.js"])
        assert result == CreateCompanion("widgets.css", WIDGETS)

    def test_style_without_companion_proposes_script(self):
        result = resolve(WIDGETS / "theme.css", ["theme.css"])
        assert result == CreateCompanion("theme.js", WIDGETS)

    def test_dotfile_without_match(self):
        result = resolve(WIDGETS / ".css", [".css"])
        assert isinstance(result, NoCompanionFound)

    def test_unsupported_file_type(self):
        with pytest.raises(UnsupportedFileType, match="style.unknownext"):
            resolve(WIDGETS / "style.unknownext", ["style.unknownext", "style.css"])

    def test_other_column_placement(self):
        config = ResolutionConfig(use_other_column=True)
        result = resolve(WIDGETS / "app.ts", ["app.ts", "app.css"], config)
        assert result.placement is Placement.OTHER
        created = resolve(WIDGETS / "app.ts", ["app.ts"], config)
        assert created.placement is Placement.OTHER

    def test_repeated_resolution_is_stable(self):
        siblings = ["app.css", "app.scss", "app.ts"]
        first = resolve(WIDGETS / "app.ts", siblings)
        assert resolve(WIDGETS / "app.ts", siblings) == first

    def test_cycles_from_companion_to_companion(self):
        siblings = ["app.css", "app.module.scss", "app.tsx", "app.test.tsx"]
        assert resolve(WIDGETS / "app.tsx", siblings).path.name == "app.css"
        assert resolve(WIDGETS / "app.css", siblings).path.name == "app.tsx"
        assert resolve(WIDGETS / "app.module.scss", siblings).path.name == "app.tsx"
        assert resolve(WIDGETS / "app.test.tsx", siblings).path.name == "app.css"


class TestCheckSupported:
    def test_returns_type(self):
        assert check_supported("a/b/app.tsx") is FileType.SCRIPT
        assert check_supported(Path("a/b/app.sass")) is FileType.STYLE

    def test_raises_for_unknown(self):
        with pytest.raises(UnsupportedFileType):
            check_supported("notes.md")


class TestTargetColumn:
    def test_no_active_column(self):
        assert target_column(None, Placement.OTHER) == 1
        assert target_column(None, Placement.CURRENT) == 1

    def test_current(self):
        assert target_column(3, Placement.CURRENT) == 3

    def test_other(self):
        assert target_column(1, Placement.OTHER) == 2
        assert target_column(2, Placement.OTHER) == 1
        assert target_column(3, Placement.OTHER) == 1
