from pathlib import Path

import pytest

from autogitlog.core import options
from autogitlog.core.options import ConfigError, EnvOutput, JsonOutput, OutputSpec, TypesOutput, WindowOutput


def test_output_spec_from_dict_accepts_camel_and_snake_case():
    spec = OutputSpec.from_dict(
        {
            "json": {"fileName": "meta.json"},
            "window": {"var_name": "GIT", "console": True},
            "env": {"prefix": "VITE_", "file": ".env.local"},
            "types": {"fileName": "git.d.ts", "interfaceName": "GitMeta"},
        }
    )
    assert spec == OutputSpec(
        json=JsonOutput(file_name="meta.json"),
        window=WindowOutput(var_name="GIT", log_to_console=True),
        env=EnvOutput(prefix="VITE_", file=".env.local"),
        types=TypesOutput(file_name="git.d.ts", interface_name="GitMeta"),
    )


def test_output_spec_section_toggles():
    spec = OutputSpec.from_dict({"json": None, "window": True, "env": False})
    assert spec.json == JsonOutput()
    assert spec.window == WindowOutput()
    assert spec.env is None
    assert spec.types is None
    assert OutputSpec.from_dict({}).is_empty()
    assert OutputSpec.from_dict(None).is_empty()


def test_output_spec_rejects_bad_input():
    with pytest.raises(ConfigError):
        OutputSpec.from_dict({"html": {}})
    with pytest.raises(ConfigError):
        OutputSpec.from_dict({"json": "git.json"})
    with pytest.raises(ConfigError):
        OutputSpec.from_dict({"json": {"fileName": 3}})


def test_from_formats_enables_defaults():
    spec = OutputSpec.from_formats(["env", "types"])
    assert spec == OutputSpec(env=EnvOutput(), types=TypesOutput())


def test_resolve_options_defaults():
    resolved = options.resolve_options()
    assert resolved.fields == options.DEFAULT_FIELDS
    assert resolved.fields is not options.DEFAULT_FIELDS
    assert resolved.outputs.is_empty()
    assert resolved.cwd is None


def test_resolve_options_fields_string_and_list():
    assert options.resolve_options({"fields": "repo, branch ,custom:git describe"}).fields == [
        "repo",
        "branch",
        "custom:git describe",
    ]
    assert options.resolve_options({"fields": ["tag"]}).fields == ["tag"]
    with pytest.raises(ConfigError):
        options.resolve_options({"fields": 5})


def test_load_config_yaml_and_json(tmp_path: Path):
    yaml_path = tmp_path / "git-log.yml"
    yaml_path.write_text(
        """
fields: [branch, commit]
outputs:
  env:
    prefix: APP_
""".strip(),
        encoding="utf-8",
    )
    resolved = options.resolve_options(options.load_config(yaml_path))
    assert resolved.fields == ["branch", "commit"]
    assert resolved.outputs == OutputSpec(env=EnvOutput(prefix="APP_"))

    json_path = tmp_path / "git-log.config.json"
    json_path.write_text('{"cwd": "src", "outputs": {"json": {"fileName": "x.json"}}}', encoding="utf-8")
    resolved = options.resolve_options(options.load_config(json_path))
    assert resolved.cwd == "src"
    assert resolved.outputs.json == JsonOutput(file_name="x.json")


def test_load_config_errors(tmp_path: Path):
    with pytest.raises(ConfigError):
        options.load_config(tmp_path / "missing.yml")

    broken = tmp_path / "broken.yml"
    broken.write_text("fields: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError):
        options.load_config(broken)

    listing = tmp_path / "list.yml"
    listing.write_text("- repo\n- branch\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        options.load_config(listing)

    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert options.load_config(empty) == {}


@pytest.mark.parametrize(
    "outputs",
    [
        {"json": {}, "window": {"varName": "bad-name"}},
        {"window": {"var_name": "1st"}},
        {"types": {"interfaceName": "Git Log"}},
    ],
)
def test_output_spec_rejects_invalid_generated_names(outputs):
    with pytest.raises(ConfigError):
        OutputSpec.from_dict(outputs)


@pytest.mark.parametrize("value", ["false", "yes", 1])
def test_window_console_requires_boolean(value):
    with pytest.raises(ConfigError):
        OutputSpec.from_dict({"window": {"console": value}})


def test_window_console_booleans():
    assert OutputSpec.from_dict({"window": {"logToConsole": False}}).window == WindowOutput(log_to_console=False)
    assert OutputSpec.from_dict({"window": {"console": True}}).window == WindowOutput(log_to_console=True)
    assert OutputSpec.from_dict({"window": {}}).window.log_to_console is False
