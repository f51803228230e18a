from click.testing import CliRunner

import hrmvm.runtime.emulator as emulator

from unit_utils import find_file


def program(name: str) -> str:
    return str(find_file(f'testdata/programs/{name}.hrm'))


def invoke(*args: str):
    return CliRunner().invoke(emulator.run, list(args))


def test_halt():
    result = invoke(program('triangular'), '5')
    assert result.exit_code == emulator.EXIT_HALT
    assert 'instructions: 48' in result.output
    assert '[15]' in result.output


def test_several_inputs_ignored_after_halt():
    result = invoke(program('countdown'), '2', '9')
    assert result.exit_code == emulator.EXIT_HALT
    assert '[2, 1]' in result.output


def test_verbose():
    result = invoke('-v', program('countdown'), '1')
    assert result.exit_code == emulator.EXIT_HALT
    assert '[1]' in result.output


def test_runtime_fault():
    result = invoke(program('triangular'))
    assert result.exit_code == emulator.EXIT_RUNTIME_FAULT
    assert 'Inbox is empty' in result.output


def test_registers_option():
    result = invoke('-r', '4', program('triangular'), '5')
    assert result.exit_code == emulator.EXIT_RUNTIME_FAULT
    assert 'Register 9 out of range' in result.output


def test_config_file(tmp_path):
    config = tmp_path / 'machine.toml'
    config.write_text('[machine]\nregisters = 4\n')
    result = invoke('-c', str(config), program('triangular'), '5')
    assert result.exit_code == emulator.EXIT_RUNTIME_FAULT


def test_option_overrides_config(tmp_path):
    config = tmp_path / 'machine.toml'
    config.write_text('[machine]\nregisters = 4\n')
    result = invoke('-c', str(config), '-r', '10', program('triangular'), '5')
    assert result.exit_code == emulator.EXIT_HALT
    assert '[15]' in result.output


def test_parse_error():
    result = invoke(program('broken'), '1')
    assert result.exit_code == emulator.EXIT_PARSE_ERROR
    assert 'shuffle' in result.output


def test_missing_program(tmp_path):
    result = invoke(str(tmp_path / 'missing.hrm'))
    assert result.exit_code == emulator.EXIT_EXEC_ERROR


def test_negative_inbox():
    result = invoke(program('negate'), '-3')
    assert result.exit_code == emulator.EXIT_HALT
    assert 'instructions: 5' in result.output
    assert '[3]' in result.output


def test_negative_inbox_after_separator():
    result = invoke(program('negate'), '--', '-7')
    assert result.exit_code == emulator.EXIT_HALT
    assert '[7]' in result.output


def test_usage_error_is_not_parse_error():
    result = invoke('-r', '0', program('negate'), '1')
    assert result.exit_code == 2
    assert result.exit_code != emulator.EXIT_PARSE_ERROR

    missing = invoke()
    assert missing.exit_code == 2
