from __future__ import annotations

from typing import Iterable, Sequence

from finance_quiz.game.levels.catalog import LEVEL_ADVANCED, LEVEL_BASIC
from finance_quiz.game.questions.errors import QuestionBankError
from finance_quiz.game.questions.types import QuizQuestion

OPTIONS_PER_QUESTION = 4

_BASIC_ROWS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    (
        "What does phishing refer to in the context of financial fraud?",
        (
            "A. A secure method of transferring money online",
            "B. Fraudulent attempts to obtain sensitive information by pretending to be a trusted entity",
            "C. A type of bank transaction",
            "D. A legal way to share personal data",
        ),
        "B. Fraudulent attempts to obtain sensitive information by pretending to be a trusted entity",
    ),
    (
        "What is the safest way to use your credit card online?",
        (
            "A. Enter your details on any website",
            'B. Use a secure, encrypted website with "https://" in the URL',
            "C. Share your details over email if requested",
            "D. Avoid using credit cards online altogether",
        ),
        'B. Use a secure, encrypted website with "https://" in the URL',
    ),
    (
        "What does two-factor authentication (2FA) enhance?",
        (
            "A. Ease of accessing accounts",
            "B. Security by requiring a second form of verification",
            "C. Simplicity of password management",
            "D. Speed of logging into accounts",
        ),
        "B. Security by requiring a second form of verification",
    ),
    (
        "Which of the following is a common sign of identity theft?",
        (
            "A. Receiving promotional emails from a company",
            "B. Unfamiliar charges on your bank or credit card statement",
            "C. Receiving a new credit card you requested",
            "D. A sudden increase in your credit score",
        ),
        "B. Unfamiliar charges on your bank or credit card statement",
    ),
    (
        "If you receive an email from a bank asking for your account details, you should",
        (
            "A. Reply immediately to verify your account",
            "B. Click on the provided link to enter your information",
            "C. Avoid responding and contact your bank directly using official contact details",
            "D. Forward the email to your friends for their opinion",
        ),
        "C. Avoid responding and contact your bank directly using official contact details",
    ),
    (
        "What does the concept of compound interest refer to?",
        (
            "A. Interest calculated on the initial principal only",
            "B. Interest calculated on the principal and previously accumulated interest",
            "C. Interest that decreases over time",
            "D. Interest paid only at the end of the investment term",
        ),
        "B. Interest calculated on the principal and previously accumulated interest",
    ),
    (
        "Which type of investment typically provides ownership in a company?",
        (
            "A. Bonds",
            "B. Mutual Funds",
            "C. Stocks",
            "D. ETFs",
        ),
        "C. Stocks",
    ),
    (
        "What does an ETF stand for?",
        (
            "A. Exchange-Traded Fund",
            "B. Equity Transfer Fund",
            "C. Earnings Transfer Facility",
            "D. Economic Trading Firm",
        ),
        "A. Exchange-Traded Fund",
    ),
    (
        "Which of the following describes a government bond?",
        (
            "A. A loan you give to the government in exchange for interest payments",
            "B. Ownership of a portion of a company",
            "C. A pool of investments managed by a professional",
            "D. A speculative stock purchase",
        ),
        "A. A loan you give to the government in exchange for interest payments",
    ),
    (
        "What is a mutual fund?",
        (
            "A. A single stock investment",
            "B. A collection of stocks and bonds managed by a professional",
            "C. A fixed deposit account",
            "D. An individual retirement account",
        ),
        "B. A collection of stocks and bonds managed by a professional",
    ),
    (
        "What is the primary benefit of diversification in investments?",
        (
            "A. It guarantees high returns",
            "B. It minimizes risk by spreading investments across different assets",
            "C. It ensures tax-free returns",
            "D. It allows you to own only one type of investment",
        ),
        "B. It minimizes risk by spreading investments across different assets",
    ),
    (
        "How is interest typically paid on a bond?",
        (
            "A. Annually or semi-annually",
            "B. Monthly",
            "C. Only at maturity",
            "D. Weekly",
        ),
        "A. Annually or semi-annually",
    ),
    (
        "What is the difference between a stock and a bond?",
        (
            "A. Stocks represent ownership; bonds represent debt",
            "B. Stocks are short-term investments; bonds are long-term investments",
            "C. Stocks provide fixed interest; bonds provide dividends",
            "D. There is no difference between the two",
        ),
        "A. Stocks represent ownership; bonds represent debt",
    ),
    (
        "What is the main advantage of investing in ETFs?",
        (
            "A. High management fees",
            "B. Diversification at a low cost",
            "C. Guaranteed returns",
            "D. Exclusive access to private companies",
        ),
        "B. Diversification at a low cost",
    ),
    (
        "Which of the following investments is the safest?",
        (
            "A. Government bonds",
            "B. Individual stocks",
            "C. Mutual funds",
            "D. Cryptocurrencies",
        ),
        "A. Government bonds",
    ),
    (
        "What does the time value of money mean in financial planning?",
        (
            "A. Money loses value over time due to inflation",
            "B. Money available now is worth more than the same amount in the future",
            "C. Future money always has more value than present money",
            "D. Money has no value over time",
        ),
        "B. Money available now is worth more than the same amount in the future",
    ),
    (
        "What is the main goal of financial independence?",
        (
            "A. To rely on a single income source",
            "B. To achieve a lifestyle not dependent on active work for income",
            "C. To maximize debt for investments",
            "D. To avoid saving money",
        ),
        "B. To achieve a lifestyle not dependent on active work for income",
    ),
)


_ADVANCED_ROWS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    # Introduction to personal finance
    (
        "What is the concept of 'opportunity cost' in personal finance?",
        (
            "A. The actual monetary cost of an item",
            "B. The value of the next best alternative given up when making a choice",
            "C. The cost of living in a particular area",
            "D. The interest rate on a savings account",
        ),
        "B. The value of the next best alternative given up when making a choice",
    ),
    (
        "What is the 'time value of money' principle?",
        (
            "A. Money is worth more at night than during the day",
            "B. Money available now is worth more than the same amount in the future due to earning potential",
            "C. Time is more valuable than money",
            "D. Money loses value over weekends",
        ),
        "B. Money available now is worth more than the same amount in the future due to earning potential",
    ),
    # Budgeting and saving
    (
        "What is the '50/30/20' budgeting rule?",
        (
            "A. Spend 50% on wants, 30% on needs, 20% on savings",
            "B. Spend 50% on needs, 30% on wants, 20% on savings",
            "C. Spend 50% on savings, 30% on needs, 20% on wants",
            "D. Spend 50% on investments, 30% on savings, 20% on needs",
        ),
        "B. Spend 50% on needs, 30% on wants, 20% on savings",
    ),
    (
        "What is 'lifestyle inflation'?",
        (
            "A. The general increase in prices over time",
            "B. Increasing living expenses as income increases",
            "C. The cost of luxury items",
            "D. The rate at which lifestyles change over time",
        ),
        "B. Increasing living expenses as income increases",
    ),
    # Money today and tomorrow
    (
        "What is the Rule of 72 used for?",
        (
            "A. Calculating tax deductions",
            "B. Estimating how long it takes for an investment to double",
            "C. Determining credit scores",
            "D. Computing mortgage payments",
        ),
        "B. Estimating how long it takes for an investment to double",
    ),
    (
        "What is 'dollar-cost averaging'?",
        (
            "A. Converting different currencies",
            "B. Investing a fixed amount regularly regardless of market conditions",
            "C. Calculating the average cost of dollars",
            "D. A method of pricing products",
        ),
        "B. Investing a fixed amount regularly regardless of market conditions",
    ),
    # Debt and borrowing
    (
        "What is the difference between secured and unsecured debt?",
        (
            "A. Secured debt has higher interest rates",
            "B. Secured debt is backed by collateral while unsecured isn't",
            "C. Unsecured debt is safer",
            "D. Secured debt doesn't require repayment",
        ),
        "B. Secured debt is backed by collateral while unsecured isn't",
    ),
    (
        "What is debt-to-income (DTI) ratio?",
        (
            "A. Total savings divided by income",
            "B. Monthly debt payments divided by monthly gross income",
            "C. Total assets divided by total debts",
            "D. Annual income divided by total debt",
        ),
        "B. Monthly debt payments divided by monthly gross income",
    ),
    # Investing
    (
        "What is a 'bear market'?",
        (
            "A. A market where prices are rising",
            "B. A market where prices are falling by 20% or more",
            "C. A market dominated by small investors",
            "D. A market with high trading volume",
        ),
        "B. A market where prices are falling by 20% or more",
    ),
    (
        "What is 'beta' in investing?",
        (
            "A. The second version of an investment product",
            "B. A measure of volatility relative to the overall market",
            "C. The return on investment",
            "D. The interest rate on bonds",
        ),
        "B. A measure of volatility relative to the overall market",
    ),
    # Retirement planning
    (
        "What is the '4% rule' in retirement planning?",
        (
            "A. Saving 4% of your annual income",
            "B. A guideline suggesting you can withdraw 4% of retirement savings annually",
            "C. Getting 4% interest on retirement accounts",
            "D. Paying 4% in retirement fees",
        ),
        "B. A guideline suggesting you can withdraw 4% of retirement savings annually",
    ),
    (
        "What is a 'catch-up contribution'?",
        (
            "A. Extra payments to make up for missed bills",
            "B. Additional allowed retirement contributions for people age 50 and older",
            "C. A type of investment strategy",
            "D. A penalty payment for late contributions",
        ),
        "B. Additional allowed retirement contributions for people age 50 and older",
    ),
    # Real estate
    (
        "What is 'loan-to-value (LTV) ratio' in real estate?",
        (
            "A. The total value of a property",
            "B. The mortgage amount divided by the appraised property value",
            "C. The monthly mortgage payment amount",
            "D. The interest rate on a mortgage",
        ),
        "B. The mortgage amount divided by the appraised property value",
    ),
    (
        "What is 'real estate appreciation'?",
        (
            "A. The decrease in property value over time",
            "B. The increase in property value over time",
            "C. The cost of property maintenance",
            "D. The monthly mortgage payment",
        ),
        "B. The increase in property value over time",
    ),
    # Behavioral finance
    (
        "What is 'loss aversion' in behavioral finance?",
        (
            "A. The tendency to avoid all investments",
            "B. The psychological tendency to feel losses more strongly than equivalent gains",
            "C. The fear of making any financial decisions",
            "D. The preference for low-risk investments",
        ),
        "B. The psychological tendency to feel losses more strongly than equivalent gains",
    ),
    (
        "What is 'confirmation bias' in investing?",
        (
            "A. Getting confirmation from a financial advisor",
            "B. The tendency to seek information that confirms existing beliefs",
            "C. Double-checking investment decisions",
            "D. Verifying investment returns",
        ),
        "B. The tendency to seek information that confirms existing beliefs",
    ),
    # Responsible investing
    (
        "What does 'ESG investing' stand for?",
        (
            "A. Economic Savings Growth",
            "B. Environmental, Social, and Governance",
            "C. Enhanced Security Guarantees",
            "D. Equity Savings Group",
        ),
        "B. Environmental, Social, and Governance",
    ),
    (
        "What is 'greenwashing' in investing?",
        (
            "A. Cleaning investment documents",
            "B. Making misleading claims about environmental benefits",
            "C. Investing in green energy",
            "D. Environmental risk assessment",
        ),
        "B. Making misleading claims about environmental benefits",
    ),
    # Cryptocurrencies and tokens
    (
        "What is a 'blockchain' in cryptocurrency?",
        (
            "A. A type of digital wallet",
            "B. A decentralized, distributed ledger technology",
            "C. A cryptocurrency exchange",
            "D. A type of crypto token",
        ),
        "B. A decentralized, distributed ledger technology",
    ),
    (
        "What is a 'smart contract'?",
        (
            "A. A legal document for cryptocurrency",
            "B. Self-executing contracts with terms directly written into code",
            "C. A contract for buying cryptocurrencies",
            "D. A type of cryptocurrency wallet",
        ),
        "B. Self-executing contracts with terms directly written into code",
    ),
    (
        "What is 'DeFi' in cryptocurrency?",
        (
            "A. A type of cryptocurrency",
            "B. Decentralized Finance - financial services using blockchain",
            "C. A digital wallet",
            "D. A cryptocurrency exchange",
        ),
        "B. Decentralized Finance - financial services using blockchain",
    ),
)


def _build_pool(
    level: str,
    rows: Iterable[tuple[str, tuple[str, ...], str]],
) -> tuple[QuizQuestion, ...]:
    return tuple(
        QuizQuestion(
            question_id=f"{level}_{index:03d}",
            text=text,
            options=options,  # type: ignore[arg-type]
            correct_option=correct_option,
            level=level,
        )
        for index, (text, options, correct_option) in enumerate(rows, start=1)
    )


def validate_question_pool(questions: Sequence[QuizQuestion]) -> None:
    """Reject a pool that the quiz could not present correctly.

    Every question needs a non-empty prompt, exactly four distinct options and
    exactly one option equal to its correct answer. Question ids must be unique
    within the pool.
    """
    seen_ids: set[str] = set()
    for question in questions:
        if question.question_id in seen_ids:
            raise QuestionBankError(f"duplicate question id: {question.question_id}")
        seen_ids.add(question.question_id)

        if not question.text.strip():
            raise QuestionBankError(f"question {question.question_id} has an empty prompt")
        if len(question.options) != OPTIONS_PER_QUESTION:
            raise QuestionBankError(
                f"question {question.question_id} has {len(question.options)} options, "
                f"expected {OPTIONS_PER_QUESTION}"
            )
        if len(set(question.options)) != len(question.options):
            raise QuestionBankError(f"question {question.question_id} has duplicate options")

        matches = sum(1 for option in question.options if option == question.correct_option)
        if matches != 1:
            raise QuestionBankError(
                f"question {question.question_id} must have exactly one option equal to "
                f"its correct answer, found {matches}"
            )


_BASIC_POOL = _build_pool(LEVEL_BASIC, _BASIC_ROWS)
_ADVANCED_POOL = _build_pool(LEVEL_ADVANCED, _ADVANCED_ROWS)

validate_question_pool(_BASIC_POOL + _ADVANCED_POOL)


def _question_pool_for_level(level: str) -> tuple[QuizQuestion, ...]:
    if level == LEVEL_BASIC:
        return _BASIC_POOL
    if level == LEVEL_ADVANCED:
        return _ADVANCED_POOL
    raise ValueError(f"unknown quiz level: {level!r}")


def get_questions(level: str) -> list[QuizQuestion]:
    return list(_question_pool_for_level(level))


def question_count(level: str) -> int:
    return len(_question_pool_for_level(level))


def get_question_by_id(question_id: str) -> QuizQuestion | None:
    for question in _BASIC_POOL + _ADVANCED_POOL:
        if question.question_id == question_id:
            return question
    return None
