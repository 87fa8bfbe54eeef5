# CLI: encrypt a file and split its key into shares, or decrypt it back from shares.
from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import structlog
import typer

from shared_secrets.config import ENCRYPTED_SUFFIX, LOG_LEVEL, SHARES_SUFFIX
from shared_secrets.crypto.cipher import Cipher, CipherError
from shared_secrets.logging import configure_logging
from shared_secrets.storage.share_file import read_shares, write_shares

app = typer.Typer(help="Encrypt files with a key split into Shamir shares")

log = structlog.get_logger(__name__)


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _with_suffix(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)


@app.callback()
def main(
    log_level: str = typer.Option(LOG_LEVEL, "--log-level", help="critical|error|warning|info|debug"),
):
    """Shamir secret sharing for file encryption keys."""
    configure_logging(log_level)


@app.command("encrypt")
def encrypt(
    source: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="File to encrypt"),
    total: int = typer.Option(..., "-n", "--total", help="Number of shares to create (> 2)"),
    threshold: int = typer.Option(..., "-k", "--threshold", help="Shares required to decrypt (1..n)"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Base name of the .aes/.frg files"),
    password: Optional[str] = typer.Option(None, "--password", help="Encryption password (prompted if omitted)"),
):
    """Encrypt SOURCE and write the key as N shares, any K of which decrypt it."""
    if total <= 2:
        _fail(f"the number of shares must be greater than 2, got {total}")
    if not 0 < threshold <= total:
        _fail(f"the threshold must be between 1 and {total}, got {threshold}")
    if password is None:
        password = typer.prompt("Password", hide_input=True, confirmation_prompt=True)

    base = output or source
    encrypted_path = _with_suffix(base, ENCRYPTED_SUFFIX)
    shares_path = _with_suffix(base, SHARES_SUFFIX)

    cipher = Cipher.from_password(password)
    encrypted_path.write_bytes(cipher.encrypt(source.read_bytes()))
    write_shares(shares_path, cipher.split_key(total, threshold))
    log.info("file encrypted", source=str(source), n=total, k=threshold)
    typer.echo(f"Wrote {encrypted_path} and {shares_path}")


@app.command("decrypt")
def decrypt(
    encrypted: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False, help="Encrypted file (.aes)"),
    shares: Path = typer.Option(..., "-s", "--shares", exists=True, readable=True, dir_okay=False, help="Share file (.frg)"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Where to write the plaintext"),
):
    """Recover the key from a share file and decrypt ENCRYPTED."""
    try:
        cipher = Cipher.from_shares(read_shares(shares))
        plaintext = cipher.decrypt(encrypted.read_bytes())
    except (ValueError, CipherError) as exc:
        log.warning("decryption failed", encrypted=str(encrypted), error=str(exc))
        _fail(str(exc))

    if output is None:
        if encrypted.suffix == ENCRYPTED_SUFFIX:
            output = encrypted.with_suffix("")
        else:
            output = _with_suffix(encrypted, ".out")
    output.write_bytes(plaintext)
    log.info("file decrypted", encrypted=str(encrypted))
    typer.echo(f"Wrote {output}")


if __name__ == "__main__":
    app()
