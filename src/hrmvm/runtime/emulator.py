import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Sequence, Tuple

import click

from hrmvm.common.settings import MachineSettings, load_settings
from hrmvm.runtime.machine import Machine, Halted, RunResult
from hrmvm.sasm.errors import ParseError


EXIT_HALT = 0
EXIT_RUNTIME_FAULT = 1
EXIT_KEYBOARD = 3
EXIT_PARSE_ERROR = 4  # 2 is click usage errors
EXIT_EXEC_ERROR = 100


def execute(program: Path, inbox: Sequence[int], settings: MachineSettings) -> RunResult:
    machine = Machine.from_file(program, settings)
    lg.debug(f'Machine ready: {len(machine.instructions)} instructions, {settings}')
    return machine.run(inbox)


def report(result: RunResult) -> int:
    if isinstance(result, Halted):
        click.echo(f'instructions: {result.instruction_count}')
        click.echo(f'{result.outbox}')
        lg.info('Execution halted gracefully')
        return EXIT_HALT

    lg.info(f'Execution halted on fault after {result.instruction_count} instructions')
    click.echo(f'error: {result.error}', err=True)
    return EXIT_RUNTIME_FAULT


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug and traces every step')
@click.option('-r', '--registers', type=click.IntRange(min=1), help='Number of registers')
@click.option('-c', '--config', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='TOML file with a [machine] table')
@click.argument('program', type=Path)
@click.argument('inbox', nargs=-1, type=int)
def run(verbose: bool, registers: int | None, config: Path | None, program: Path, inbox: Tuple[int]):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('HRMVM')

    try:
        settings = load_settings(config) if config else MachineSettings()
        settings.update(register_count=registers, enable_logging=True if verbose else None)

        result = execute(program, list(inbox), settings)
        sys.exit(report(result))

    except ParseError as e:
        lg.info(f'Program rejected: {e}')
        click.echo(f'parse error: {e}', err=True)
        sys.exit(EXIT_PARSE_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
