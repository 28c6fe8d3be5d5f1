import subprocess

SEPARATOR = "-" * 27


def print_output(output: subprocess.CompletedProcess[bytes]) -> None:
    print(decode_stream(output.stderr, "stderr"))
    print(SEPARATOR)
    print(decode_stream(output.stdout, "stdout"))
    print(SEPARATOR)
    print(f"exit status: {output.returncode}")


def print_result_output(
    result: subprocess.CompletedProcess[bytes] | BaseException,
) -> None:
    match result:
        case subprocess.CompletedProcess():
            print_output(result)
        case BaseException():
            print("output error !!")
            print(str(result))


def decode_stream(data: bytes | str | None, name: str) -> str:
    match data:
        case None:
            return ""
        case str():
            return data
        case bytes():
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValueError(f"fail to read {name}") from e
