"""Prompt builder for the event-extraction completion call.

The whole request is a single user message: fixed instructions, three fixed
few-shot examples, then the user's text in a fenced block.  The output
depends only on the arguments, so identical inputs give identical prompts.
"""

from __future__ import annotations

from datetime import date, timedelta

_FENCE = "```"

# German flat listing: multi-field extraction from non-English text.
_EXAMPLE_LISTING_TEXT = """\
Kosten

Nettomiete:
CHF 2'369.-
Nebenkosten:
CHF 160.-
Miete:
CHF 2'529.-

Beschreibung:

An bester Lage im Kreis 3 - Wunderschöne 3.5-Zimmer-Wohnung bietet Wohnkomfort und Eigentumswohnungsstandard in einem:
Weitere 2.5 - Zimmer-Wohnungen ab 42 m2 im gleichen Haus, Miete ab: 1'890.00 pro Monat
Wo? - Idastrasse 23, 8003 Zürich
Ab Wann? - 01.10.2024
Interessiert an einer Besichtigung?
Besichtigung: Donnerstag, 15.08.2024 um 16:00 Uhr
Merkmale:
Top Lage, nahe pulsierendem Idaplatz
Besichtigung: Donnerstag, 15.08.2024 um 16:00 Uhr. Wir bitten Sie um eine Voranmeldung per Mail an: vermietung@example.ch.
Haustiere wie Hund und Katze sind leider nicht erlaubt.
Für eine sichere Bewerbung, bitten wir Sie um Auszug aus dem Betreibungsregister nicht älter als 3 Monate."""

_EXAMPLE_LISTING_JSON = """\
{
"title": "Besichtigung Idastrasse",
"summary": "3.5 Wohnung in Kreis 3. Miete: CHF 2529.",
"startTime": "2024-08-15T16:00:00",
"location": "Idastrasse 23, 8003 Zürich"
}"""

_EXAMPLE_BBQ_TEXT = """\
Hey everyone, I would like to invite you for a chill BBQ tomorrow, around 7 at my place? Until 10?
Best Max"""

_EXAMPLE_SMALL_TALK_TEXT = "Hey dawg whats up"

_EMPTY_JSON = "{}"


def build_prompt(
    text: str,
    today: date,
    keep_languages: str,
    translate_to: str,
) -> str:
    """Build the complete extraction prompt.

    Args:
        text: The user's text.  Inserted verbatim as the last block.
        today: The date "today" refers to.  "Tomorrow" in the examples is
            resolved relative to it.
        keep_languages: Languages the model may keep for the summary
            (e.g. ``"de-CH,en"``).
        translate_to: Language to translate into otherwise.

    Returns:
        The prompt string.
    """
    tomorrow = (today + timedelta(days=1)).isoformat()

    bbq_json = (
        "{\n"
        '"title": "BBQ with Max",\n'
        '"location": "Max place",\n'
        f'"startTime": "{tomorrow}T19:00:00",\n'
        f'"endTime": "{tomorrow}T22:00:00"\n'
        "}"
    )

    return f"""\
You are an expert at extracting calendar event details from a text.
Provide the result in JSON format with fields: title, summary, location, startTime, endTime (both in ISO 8601 format).
If a field is not present, omit it from the response. Do not include fields that can not be derived from the text.
Keep the summary very short and concise, the full original text will also be provided.
The following languages can be kept for the description: {keep_languages}.
Otherwise translate to {translate_to}.
If there is no event in the text, return an empty JSON object.
Today is {today.isoformat()}
Here are some examples:

{_example(_EXAMPLE_LISTING_TEXT, _EXAMPLE_LISTING_JSON)}

{_example(_EXAMPLE_BBQ_TEXT, bbq_json)}

{_example(_EXAMPLE_SMALL_TALK_TEXT, _EMPTY_JSON)}

Text:
{_FENCE}
{text}
{_FENCE}"""


def _example(text: str, extracted: str) -> str:
    """Format one few-shot example as a text block and its expected JSON."""
    return f"Text:\n{_FENCE}\n{text}\n{_FENCE}\nExtracted JSON:\n{extracted}"
