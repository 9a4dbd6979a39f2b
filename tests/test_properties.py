"""
Property-based tests using Hypothesis.
"""

from functools import reduce
import operator

from hypothesis import given, settings
from hypothesis import strategies as st

from sumire.exceptions import SumireError
from sumire.helper import Reporter
from sumire.run import run
from sumire.token import KEYWORDS, TokenType
from sumire.tokenize import tokenize
from sumire.value import number_of

NUMBER_TEXT = st.from_regex(r"\A[0-9]+(\.[0-9]+)?\Z")
IDENTIFIER_TEXT = st.from_regex(r"\A[A-Za-z_][A-Za-z0-9_]*\Z")
STRING_INTERIOR = st.text().filter(lambda text: '"' not in text)


@given(NUMBER_TEXT)
def test_number_text_scans_to_one_number(text):
    reporter = Reporter()
    tokens = tokenize(text, reporter)
    assert [token.kind for token in tokens] == [TokenType.Number, TokenType.EOF]
    assert tokens[0].literal == float(text)
    assert tokens[0].lexeme == text
    assert not reporter.had_error


@given(STRING_INTERIOR)
def test_string_interior_is_the_lexeme(text):
    reporter = Reporter()
    tokens = tokenize(f'"{text}"', reporter)
    assert [token.kind for token in tokens] == [TokenType.STRING, TokenType.EOF]
    assert tokens[0].lexeme == text
    assert tokens[0].line == 1
    assert tokens[-1].line == 1 + text.count("\n")
    assert not reporter.had_error


@given(STRING_INTERIOR)
def test_unterminated_string_never_yields_a_token(text):
    reporter = Reporter()
    tokens = tokenize(f'"{text}', reporter)
    assert [token.kind for token in tokens] == [TokenType.EOF]
    assert [item.message for item in reporter.diagnostics] == ["Unterminated string."]


@given(IDENTIFIER_TEXT)
def test_identifier_text_is_keyword_or_identifier(text):
    tokens = tokenize(text)
    assert len(tokens) == 2
    assert tokens[0].kind == KEYWORDS.get(text, TokenType.Identifier)
    assert tokens[0].lexeme == text


@given(st.sampled_from(sorted(KEYWORDS)), st.sampled_from(["", " ", "\n", "("]))
def test_keywords_never_scan_as_identifiers(word, suffix):
    tokens = tokenize(word + suffix)
    assert tokens[0].kind == KEYWORDS[word]


@given(st.text())
@settings(max_examples=300)
def test_tokenize_always_completes(text):
    tokens = tokenize(text)
    assert tokens[-1].kind == TokenType.EOF
    assert [token for token in tokens if token.kind == TokenType.EOF] == tokens[-1:]


@given(st.text(alphabet=st.sampled_from('0123456789.+-*/!=<>()" \nabtruefalsnil@'), max_size=60))
@settings(max_examples=300)
def test_run_only_raises_its_own_errors(text):
    try:
        run(text)
    except SumireError:
        pass


@given(st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=20))
def test_subtraction_folds_left(numbers):
    source = " - ".join(str(number) for number in numbers)
    assert run(source) == number_of(reduce(operator.sub, numbers))
