"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface): any argument missing from the command
line is asked for interactively, unless non-interactive mode is on, in which case defaults are used where they exist.

Typical usage example:

    interopcrypt keygen -P priv.pem -p pub.pem --keysize 2048
    interopcrypt -n sign -P priv.pem --message hello
    python -m interopcrypt aes-encrypt --key 123456 --md5-key --message 10005154
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import interopcrypt
from interopcrypt import aes
from interopcrypt import codec
from interopcrypt import hashing
from interopcrypt import keyformat
from interopcrypt import rsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in interopcrypt.",
            choices=["keygen", "encrypt", "decrypt", "sign", "verify", "pubkey", "convert", "aes-encrypt",
                     "aes-decrypt", "md5"],
        ),
    "keygen":
        HelpData("RSA key pair generation utility."),
    "encrypt":
        HelpData("RSA encryption utility."),
    "decrypt":
        HelpData("RSA decryption utility."),
    "sign":
        HelpData("RSA signing utility."),
    "verify":
        HelpData("RSA signature verification utility."),
    "pubkey":
        HelpData("Public key extraction from a private key."),
    "convert":
        HelpData("Private key conversion between PKCS#1 and PKCS#8."),
    "aes-encrypt":
        HelpData("Fixed-IV AES encryption utility. Interoperability only, not confidential!"),
    "aes-decrypt":
        HelpData("Fixed-IV AES decryption utility."),
    "md5":
        HelpData("MD5 digest utility."),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
        ),
    "output":
        HelpData(
            description="Location of the key file to write.",
            format=pathlib.Path,
        ),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "key":
        HelpData(
            description="AES key text. Used as UTF-8 bytes, or through MD5 with --md5-key.",
            format=str,
        ),
    "md5_key":
        HelpData(
            description="Use the MD5 digest of the key text as the AES key?",
            choices=["Y", "N"],
            advanced=True,
            default="N",
        ),
    "encoding":
        HelpData(description="Payload encoding.", choices=["utf-8", "utf-16", "ascii"], advanced=True, default="utf-8"),
    "keysize":
        HelpData(
            description="Key size (in bits).",
            choices=["1024", "2048", "3072", "4096"],
            default=str(rsa.DEFAULT_KEY_SIZE),
        ),
    "algorithm":
        HelpData(description="Digest to sign under.",
                 choices=[alg.value for alg in rsa.SignatureAlgorithm],
                 advanced=True,
                 default=rsa.SignatureAlgorithm.SHA256.value),
    "target":
        HelpData(description="Private key encoding to write.", choices=["PKCS1", "PKCS8"], default="PKCS1"),
    "signature":
        HelpData(
            description="The Base64 signature to validate against the payload and public key.",
            format=str,
        ),
    "overwrite":
        HelpData(
            description="Overwrite specified destination files if they exist?",
            choices=["Y", "N"],
            default="N",
        )
}

needs = {
    "keygen": ("public_key", "private_key", "keysize"),
    "encrypt": ("public_key", "message", "encoding"),
    "decrypt": ("private_key", "message", "encoding"),
    "sign": ("private_key", "message", "algorithm", "encoding"),
    "verify": ("public_key", "message", "signature", "algorithm", "encoding"),
    "pubkey": ("private_key", "output"),
    "convert": ("private_key", "target", "output"),
    "aes-encrypt": ("key", "message", "md5_key", "encoding"),
    "aes-decrypt": ("key", "message", "md5_key", "encoding"),
    "md5": ("message", "encoding"),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-p", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", type=help_dict["message"].format, help=help_dict["message"].description)
encp = argparse.ArgumentParser(add_help=False)
encp.add_argument("--encoding", "-e", choices=help_dict["encoding"].choices, help=help_dict["encoding"].description)
algo = argparse.ArgumentParser(add_help=False)
algo.add_argument("--algorithm", "-s", choices=help_dict["algorithm"].choices, help=help_dict["algorithm"].description)
output = argparse.ArgumentParser(add_help=False)
output.add_argument("--output", "-o", type=help_dict["output"].format, help=help_dict["output"].description)
aeskey = argparse.ArgumentParser(add_help=False)
aeskey.add_argument("--key", "-k", type=help_dict["key"].format, help=help_dict["key"].description)
aeskey.add_argument("--md5-key", "-m", action="store_const", const="Y", help=help_dict["md5_key"].description)
corep = argparse.ArgumentParser(prog="interopcrypt")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {interopcrypt.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
corep.add_argument("--verbose", "-V", action="store_true", help="Log debug information to stderr")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

keygen = commands.add_parser("keygen", parents=[privkey, pubkey], help=help_dict["keygen"].description)
keygen.add_argument("--keysize", choices=help_dict["keysize"].choices, help=help_dict["keysize"].description)
keygen.add_argument("--overwrite", "-O", action="store_const", const="Y", help=help_dict["overwrite"].description)

commands.add_parser("encrypt", parents=[pubkey, payloads, encp], help=help_dict["encrypt"].description)
commands.add_parser("decrypt", parents=[privkey, payloads, encp], help=help_dict["decrypt"].description)
commands.add_parser("sign", parents=[privkey, payloads, algo, encp], help=help_dict["sign"].description)
verify = commands.add_parser("verify", parents=[pubkey, payloads, algo, encp], help=help_dict["verify"].description)
verify.add_argument("--signature", "-S", type=help_dict["signature"].format, help=help_dict["signature"].description)
commands.add_parser("pubkey", parents=[privkey, output], help=help_dict["pubkey"].description)
convert = commands.add_parser("convert", parents=[privkey, output], help=help_dict["convert"].description)
convert.add_argument("--target", "-t", choices=help_dict["target"].choices, help=help_dict["target"].description)
commands.add_parser("aes-encrypt", parents=[aeskey, payloads, encp], help=help_dict["aes-encrypt"].description)
commands.add_parser("aes-decrypt", parents=[aeskey, payloads, encp], help=help_dict["aes-decrypt"].description)
commands.add_parser("md5", parents=[payloads, encp], help=help_dict["md5"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def check_message(mess: str, enc: str = "utf-8") -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding=enc) as f:
            mess = f.read()
    return mess


def aes_key(args: argparse.Namespace) -> bytes:
    if args.md5_key == "Y":
        return hashing.md5_text(args.key)
    return codec.utf8_encode(args.key)


def execute(args: argparse.Namespace, pspr: typing.Callable[[str], None]) -> int:
    """Runs a fully specified subcommand, returning the process exit code."""
    match args.subcommand:
        case "keygen":
            if args.private_key.exists() or args.public_key.exists():
                if getattr(args, "overwrite", None) is None:
                    args.overwrite = choice_handler("overwrite", (args.non_interactive, args.advanced), pspr)
                if args.overwrite == "N":
                    print("Destination private or public key already exists!")
                    return 1
            pair = rsa.generate_key_pair(int(args.keysize))
            keyformat.write_pem(args.private_key, "PKCS1", pair.private_key)
            keyformat.write_pem(args.public_key, "SPKI", pair.public_key)
            pspr("\nKey pair generated!")
        case "encrypt":
            pub = keyformat.read_key_file(args.public_key)
            ciph = rsa.encrypt_base64(check_message(args.message, args.encoding).encode(args.encoding), pub)
            pspr("Ciphertext:")
            print(ciph)
        case "decrypt":
            priv = keyformat.read_key_file(args.private_key)
            clear = rsa.decrypt_from_base64(check_message(args.message).strip(), priv)
            pspr("Cleartext:")
            print(clear.decode(args.encoding))
        case "sign":
            priv = keyformat.read_key_file(args.private_key)
            payload = check_message(args.message, args.encoding).encode(args.encoding)
            signature = codec.b64_encode(rsa.sign(payload, priv, rsa.SignatureAlgorithm(args.algorithm)))
            pspr("Signature:")
            print(signature)
        case "verify":
            pub = keyformat.read_key_file(args.public_key)
            payload = check_message(args.message, args.encoding).encode(args.encoding)
            signature = codec.b64_decode(args.signature.strip())
            if not rsa.verify(payload, pub, signature, rsa.SignatureAlgorithm(args.algorithm)):
                print("Signature Verification Failed!")
                return 1
            pspr("Signature Verified!")
        case "pubkey":
            priv = keyformat.read_key_file(args.private_key)
            keyformat.write_pem(args.output, "SPKI", rsa.extract_public_key(priv))
            pspr("\nPublic key extracted!")
        case "convert":
            priv = keyformat.read_key_file(args.private_key)
            converted = rsa.convert_private_key(priv, keyformat.KeyEncoding(args.target))
            keyformat.write_pem(args.output, args.target, converted)
            pspr(f"\nPrivate key written as {args.target}!")
        case "aes-encrypt":
            ciph = aes.encrypt_base64(check_message(args.message, args.encoding).encode(args.encoding), aes_key(args))
            pspr("Ciphertext:")
            print(ciph)
        case "aes-decrypt":
            clear = aes.decrypt_from_base64(check_message(args.message).strip(), aes_key(args))
            pspr("Cleartext:")
            print(clear.decode(args.encoding))
        case "md5":
            pspr("MD5:")
            print(hashing.md5_hex(check_message(args.message, args.encoding).encode(args.encoding)))
    return 0


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to interopcrypt!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        code = execute(args, pspr)
    except interopcrypt.InteropCryptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    if code:
        sys.exit(code)
    pspr("Thank you for using interopcrypt!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
