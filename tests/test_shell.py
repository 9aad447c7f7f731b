"""Unit tests for hostenv.shell."""

import pytest

from hostenv.models import ShellConfig
from hostenv.shell import Dialect, EnvUsageHintGenerator, detect_shell, lookup, render
from hostenv.shell.detection import _classify_shell


class TestDialectLookup:
    @pytest.mark.parametrize(
        ("shell_id", "expected"),
        [
            ("", ("export ", '="', '"\n')),
            ("bash", ("export ", '="', '"\n')),
            ("fish", ("set -gx ", ' "', '";\n')),
            ("powershell", ("$Env:", ' = "', '"\n')),
            ("cmd", ("SET ", "=", "\n")),
        ],
    )
    def test_set_syntax(self, shell_id, expected):
        syntax = lookup(shell_id)
        assert (syntax.prefix, syntax.delimiter, syntax.suffix) == expected

    @pytest.mark.parametrize(
        ("shell_id", "expected"),
        [
            ("bash", ("unset ", "", "\n")),
            ("fish", ("set -e ", "", ";\n")),
            ("powershell", ("Remove-Item Env:\\\\", "", "\n")),
            ("cmd", ("SET ", "=", "\n")),
        ],
    )
    def test_unset_syntax(self, shell_id, expected):
        syntax = lookup(shell_id, unset=True)
        assert (syntax.prefix, syntax.delimiter, syntax.suffix) == expected

    def test_unknown_shell_falls_back_to_default(self):
        assert lookup("tcsh") == lookup("")
        assert Dialect.from_id("tcsh") is Dialect.DEFAULT

    def test_shell_ids_are_case_sensitive(self):
        assert Dialect.from_id("Fish") is Dialect.DEFAULT


class TestUsageHints:
    @pytest.mark.parametrize(
        ("shell", "command_line", "expected"),
        [
            (
                "",
                "machine env default",
                '# Run this command to configure your shell: \n# eval "$(machine env default)"\n',
            ),
            (
                "",
                "machine env --unset",
                '# Run this command to configure your shell: \n# eval "$(machine env --unset)"\n',
            ),
            (
                "zsh",
                "hostenv env quux",
                '# Run this command to configure your shell: \n# eval "$(hostenv env quux)"\n',
            ),
            (
                "tcsh",
                "hostenv env --shell=tcsh quux",
                "# Run this command to configure your shell: \n"
                '# eval "$(hostenv env --shell=tcsh quux)"\n',
            ),
            (
                "fish",
                "./machine env --shell=fish --no-proxy default",
                "# Run this command to configure your shell: \n"
                "# eval (./machine env --shell=fish --no-proxy default)\n",
            ),
            (
                "powershell",
                "./machine env --shell=powershell --swarm default",
                "# Run this command to configure your shell: \n"
                "# ./machine env --shell=powershell --swarm default | Invoke-Expression\n",
            ),
            (
                "cmd",
                "./machine env --shell=cmd default",
                "REM Run this command to configure your shell: \n"
                "REM \tFOR /f \"tokens=*\" %i IN ('./machine env --shell=cmd default') DO %i\n",
            ),
        ],
    )
    def test_hint_per_dialect(self, shell, command_line, expected):
        hint = EnvUsageHintGenerator().generate(shell, command_line.split(" "))
        assert hint == expected

    def test_same_input_same_output(self):
        generator = EnvUsageHintGenerator()
        args = ["hostenv", "env", "quux"]
        assert generator.generate("zsh", args) == generator.generate("zsh", args)


class TestShellDetection:
    def test_classifies_shell_paths(self):
        assert _classify_shell("/usr/bin/fish") == "fish"
        assert _classify_shell("pwsh") == "powershell"
        assert _classify_shell("C:\\Windows\\System32\\cmd.exe") == "cmd"
        assert _classify_shell("/bin/zsh") == "zsh"

    def test_detects_from_shell_env(self):
        assert detect_shell({"SHELL": "/usr/local/bin/fish"}) == "fish"

    def test_missing_shell_on_windows_uses_cmd(self):
        assert detect_shell({}, os_name="nt") == "cmd"

    def test_missing_shell_elsewhere_uses_default(self):
        assert detect_shell({}, os_name="posix") == ""


class TestRender:
    def test_bash_set(self):
        cfg = ShellConfig(
            prefix="export ",
            delimiter='="',
            suffix='"\n',
            usage_hint="# hint\n",
            docker_cert_path="/m/quux",
            docker_host="tcp://1.2.3.4:2376",
            docker_tls_verify="1",
            machine_name="quux",
            no_proxy_var="NO_PROXY",
            no_proxy_value="1.2.3.4",
        )
        assert render(cfg) == (
            'export DOCKER_TLS_VERIFY="1"\n'
            'export DOCKER_HOST="tcp://1.2.3.4:2376"\n'
            'export DOCKER_CERT_PATH="/m/quux"\n'
            'export DOCKER_MACHINE_NAME="quux"\n'
            'export NO_PROXY="1.2.3.4"\n'
            "# hint\n"
        )

    def test_fish_unset(self):
        cfg = ShellConfig(prefix="set -e ", delimiter="", suffix=";\n", usage_hint="# hint\n")
        assert render(cfg) == (
            "set -e DOCKER_TLS_VERIFY;\n"
            "set -e DOCKER_HOST;\n"
            "set -e DOCKER_CERT_PATH;\n"
            "set -e DOCKER_MACHINE_NAME;\n"
            "# hint\n"
        )

    def test_cmd_unset_clears_by_assignment(self):
        cfg = ShellConfig(prefix="SET ", delimiter="=", suffix="\n", usage_hint="")
        assert render(cfg).splitlines()[0] == "SET DOCKER_TLS_VERIFY="


class TestShellConfig:
    def test_proxy_fields_must_be_paired(self):
        with pytest.raises(ValueError):
            ShellConfig(prefix="", delimiter="", suffix="", usage_hint="", no_proxy_var="NO_PROXY")
