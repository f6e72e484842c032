"""Tests for gpg key listing."""

import subprocess
from types import SimpleNamespace

import pytest

from git_signing_key import gpg
from git_signing_key.errors import KeyListingError
from git_signing_key.types import KeyRecord

LISTING = """\
/home/jane/.gnupg/pubring.kbx
-----------------------------
sec   rsa4096/ABCD1234EFGH5678 2023-01-01 [SC]
      0123456789ABCDEF0123456789ABCDEFABCD1234
uid                 [ultimate] Jane Doe <jane@example.com>
uid                 [ultimate] Jane Doe <jane@work.example>
ssb   rsa4096/1111222233334444 2023-01-01 [E]

sec   ed25519/9999888877776666 2024-02-02 [SC] [expires: 2026-02-02]
      FEDCBA9876543210FEDCBA98765432109999888877776666
uid                 [ unknown] Bot <bot@example.com>
ssb   cv25519/5555444433332222 2024-02-02 [E]
"""


def test_parse_secret_keys_reads_ids_and_first_uid():
    assert gpg.parse_secret_keys(LISTING) == [
        KeyRecord("ABCD1234EFGH5678", "Jane Doe <jane@example.com>"),
        KeyRecord("9999888877776666", "Bot <bot@example.com>"),
    ]


def test_parse_secret_keys_skips_key_without_uid():
    text = "sec   rsa2048/AAAA000011112222 2020-01-01 [SC]\nssb   rsa2048/BBBB 2020-01-01 [E]\n"
    assert gpg.parse_secret_keys(text) == []


def test_parse_secret_keys_handles_smartcard_marker():
    text = "sec>  rsa4096/CARD000011112222 2021-01-01 [SC]\nuid   [full] Card User\n"
    assert gpg.parse_secret_keys(text) == [KeyRecord("CARD000011112222", "Card User")]


def test_parse_secret_keys_empty_output():
    assert gpg.parse_secret_keys("") == []


def test_provider_runs_gpg_long_format(monkeypatch):
    calls = []

    def _run(cmd, **kwargs):
        calls.append(cmd)
        return SimpleNamespace(returncode=0, stdout=LISTING, stderr="")

    monkeypatch.setattr(gpg.subprocess, "run", _run)
    keys = gpg.GpgKeyProvider("gpg2").list_keys()
    assert calls == [["gpg2", "--list-secret-keys", "--keyid-format", "long"]]
    assert [k.identifier for k in keys] == ["ABCD1234EFGH5678", "9999888877776666"]


def test_provider_missing_gpg(monkeypatch):
    def _run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(gpg.subprocess, "run", _run)
    with pytest.raises(KeyListingError, match="not found"):
        gpg.GpgKeyProvider().list_keys()


def test_provider_gpg_failure(monkeypatch):
    monkeypatch.setattr(
        gpg.subprocess,
        "run",
        lambda cmd, **kwargs: SimpleNamespace(returncode=2, stdout="", stderr="gpg: keyring locked"),
    )
    with pytest.raises(KeyListingError, match="keyring locked"):
        gpg.GpgKeyProvider().list_keys()


def test_provider_timeout(monkeypatch):
    def _run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

    monkeypatch.setattr(gpg.subprocess, "run", _run)
    with pytest.raises(KeyListingError, match="timed out"):
        gpg.GpgKeyProvider(timeout=1).list_keys()
