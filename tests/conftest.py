"""Shared statement texts for the test suite"""

import pytest


STRONG_STATEMENT = (
    "Reading 'The Undercover Economist' by Tim Harford first made me question how markets set prices. "
    "This led me to an online course on edX in game theory, where the lecture on Nash equilibrium showed "
    "the link between individual incentives and collective outcomes. Building on this, I investigated the "
    "relationship between minimum wage policy and youth employment in my independent research project, "
    "using regression analysis on regional data from 2010 to 2020. I learned that correlation is not "
    "causation, and I realised that econometric methodology matters as much as the theory itself. "
    "Consequently I read research papers from the academic journal Econometrica, which deepened my "
    "understanding of differential equations in growth models. However, I am beginning to understand how "
    "much I still have to learn. For example, my analysis of the data specifically ignored regional price "
    "levels. I hope to study economics at university and aim to explore behavioural economics further."
)

LISTING_STATEMENT = (
    "I have volunteered at a food bank. I also play the violin in the school orchestra. "
    "I did a summer placement at an accounting firm. I have completed a coding course online. "
    "I also joined the debating society at school. I did the school charity fun run."
)

CLICHE_STATEMENT = (
    "I have always been interested in economics since a young age. I am passionate about economics "
    "because it is interesting. I want to make a difference in the world and pursue my dreams. "
    "I believe that this subject is important in today's world. Over the years I have had a passion for "
    "markets, and I was fascinated by how they work. I want to step out of my comfort zone and follow my "
    "passion to achieve my goals and build a bright future. In conclusion, it is clear that I am ready."
)

NO_EXAMPLES_STATEMENT = " ".join(
    ["Economics explains how people respond to incentives in markets."] * 20
)


@pytest.fixture
def strong_statement():
    return STRONG_STATEMENT


@pytest.fixture
def listing_statement():
    return LISTING_STATEMENT


@pytest.fixture
def cliche_statement():
    return CLICHE_STATEMENT


@pytest.fixture
def no_examples_statement():
    return NO_EXAMPLES_STATEMENT


@pytest.fixture
def lse_economics():
    return {'name': 'London School of Economics (LSE)', 'course': 'Economics'}
