from tests.sequences import generate_sequences, generate_counts, generate_nests


def pytest_addoption(parser):
    parser.addoption("--all", action="store_true", help="run all sequence combinations")


def pytest_generate_tests(metafunc):
    if metafunc.config.getoption("all"):
        alphabet = [1, 2, 3]
        max_len = 4
    else:
        alphabet = [1, 2]
        max_len = 3
    sequences = generate_sequences(alphabet, max_len)
    if "xs" in metafunc.fixturenames:
        metafunc.parametrize("xs", sequences)
    if "n" in metafunc.fixturenames:
        metafunc.parametrize("n", generate_counts(max_len))
    if "xss" in metafunc.fixturenames:
        metafunc.parametrize("xss", generate_nests(sequences))
