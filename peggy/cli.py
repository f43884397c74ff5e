"""
peggy.cli: operator helpers for bridged-token denominations.

Implements:
  - peggy denom ADDRESS          display + storage form of a contract's denom
  - peggy decode DENOM           contract address behind a denom
  - peggy validate ADDRESS       hex-address syntax check
  - peggy sum CONTRACT AMOUNT... overflow-checked sum of token amounts
  - peggy config                 effective naming convention
  - peggy --version              package version

The naming convention comes from `peggy.config.load()` (PEGGY_CONFIG_FILE,
PEGGY_DENOM_PREFIX, PEGGY_DENOM_SEPARATOR).
"""

from __future__ import annotations

import json
from typing import List, NoReturn, Optional

import typer

from peggy import config as pconfig
from peggy import get_version
from peggy.denom import DenomCodec
from peggy.erc20 import ERC20Token
from peggy.errors import PeggyError
from peggy.logging import bind, clear_context, setup_logging
from peggy.types.eth_address import EthAddress
from peggy.utils.bytes import from_hex

app = typer.Typer(
    name="peggy",
    add_completion=False,
    no_args_is_help=True,
    help="Encode, decode and check bridged ERC20 denominations.",
)


def _fail(err: Exception) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(1)


def _codec() -> DenomCodec:
    try:
        return DenomCodec(pconfig.load())
    except (PeggyError, FileNotFoundError) as e:
        _fail(e)


def _pretty(obj: dict) -> str:
    return json.dumps(obj, indent=2, sort_keys=True)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"peggy {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (debug, info, warning, error).",
        envvar="PEGGY_LOG_LEVEL",
    ),
    log_format: str = typer.Option("text", "--log-format", help="text or json"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    setup_logging(level=log_level.upper() if log_level else None, fmt=log_format)
    clear_context()
    bind(command=ctx.invoked_subcommand)


@app.command()
def denom(
    address: str = typer.Argument(..., help="0x-prefixed ERC20 contract address."),
    as_json: bool = typer.Option(False, "--json", help="Output result as JSON."),
) -> None:
    """Print the denomination of an ERC20 contract."""
    codec = _codec()
    try:
        contract = EthAddress.from_hex(address)
    except PeggyError as e:
        _fail(e)

    stored = codec.encode_denom(contract)
    out = {
        "contract": contract.hex(),
        "denom": codec.denom_string(contract),
        "storage_hex": stored.hex(),
    }
    if as_json:
        typer.echo(_pretty(out))
        return
    typer.echo(f"Contract:  {out['contract']}")
    typer.echo(f"Denom:     {out['denom']}")
    typer.echo(f"Storage:   0x{out['storage_hex']}")


@app.command()
def decode(
    value: str = typer.Argument(..., help="Denom string, or hex of the storage bytes with --raw-hex."),
    raw_hex: bool = typer.Option(False, "--raw-hex", help="VALUE is hex of the raw storage bytes."),
) -> None:
    """Print the ERC20 contract behind a denomination."""
    codec = _codec()
    try:
        if raw_hex:
            try:
                data = from_hex(value)
            except ValueError as e:
                _fail(e)
            contract = codec.decode_denom_bytes(data)
        else:
            contract = codec.decode_denom_bytes(codec.decode_denom_string(value))
    except PeggyError as e:
        _fail(e)
    typer.echo(contract.hex())


@app.command()
def validate(
    address: str = typer.Argument(..., help="Address to check."),
) -> None:
    """Exit 0 if ADDRESS is a valid Ethereum hex address, 1 otherwise."""
    try:
        DenomCodec.validate_eth_address(address)
    except PeggyError as e:
        _fail(e)
    typer.echo("ok")


@app.command("sum")
def sum_amounts(
    contract: str = typer.Argument(..., help="ERC20 contract address."),
    amounts: List[int] = typer.Argument(..., help="uint64 amounts to add."),
    as_json: bool = typer.Option(False, "--json", help="Output result as JSON."),
) -> None:
    """Add token amounts with the uint64 overflow check and print the coin."""
    codec = _codec()
    try:
        total = ERC20Token.new(amounts[0], contract)
        for amount in amounts[1:]:
            total = total.add(ERC20Token.new(amount, contract))
        total.validate_basic(codec)
    except (PeggyError, ValueError) as e:
        _fail(e)

    coin = total.to_coin(codec)
    if as_json:
        typer.echo(_pretty({**total.to_dict(), "coin": str(coin)}))
        return
    typer.echo(str(coin))


@app.command("config")
def show_config() -> None:
    """Print the effective naming convention as JSON."""
    try:
        typer.echo(pconfig.pretty())
    except (PeggyError, FileNotFoundError) as e:
        _fail(e)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
