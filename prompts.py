"""
Centralized prompts for the macrodesk agents.
This file contains all prompt templates and system messages used throughout the application.
"""

# --- News Scout Prompts ---
NEWS_SCOUT_PROMPT_TEMPLATE = """
Find the top {top_n} most significant financial news items published in the past {lookback_hours} hours.
Rank them by relevance and impact on global markets.
You MUST prioritize reputable sources: {sources}.
For every item, run a second search to confirm the story is authentic and its key details are correct.
List the {top_n} confirmed items in ranked order. For each item give a brief summary and the primary source.
"""

NEWS_SCOUT_SYSTEM_MESSAGE = "You are a 'News Scout' agent. Your only job is to find and verify important financial news from trusted sources using your search tool."

# Used when provider-side web search is disabled and headlines come from a news search instead
NEWS_SCOUT_HEADLINES_PROMPT_TEMPLATE = """
Below are financial news headlines collected from a news search covering roughly the past {lookback_hours} hours.
Select the top {top_n} most significant items and rank them by relevance and impact on global markets.
Prefer reputable sources: {sources}. Ignore duplicates, opinion pieces and anything older than {lookback_hours} hours.
For each selected item give a brief summary and the primary source.

Headlines:
{headlines}
"""

# --- Verification Prompts ---
VERIFICATION_PROMPT_TEMPLATE = """
Fact-check the following news items produced by another agent.
For each item you MUST:
1. Confirm the story is real and not fabricated.
2. Cross-check the core details of the summary against other reputable sources.
3. Confirm the original article was published within the last {lookback_hours} hours.

Output JSON with these exact fields:
- verified: boolean (true only if every item is real, accurate and recent)
- reason: string (short explanation; name the failing items and why when verified is false)
- flagged_items: array of strings (the items that failed, empty when verified is true)

News to verify:
---
{news_text}
---

Return ONLY valid JSON with the exact keys specified above.
"""

VERIFICATION_SYSTEM_MESSAGE = "You are a 'Verification' agent. You fact-check financial news and its publication age. Return ONLY valid JSON with exactly these keys: verified (boolean), reason (string), flagged_items (array of strings)."

# --- Macro Analyst Prompts ---
MACRO_ANALYST_PROMPT_TEMPLATE = """
Analyze the following verified financial news items.
For each item provide a detailed macro-economic analysis:
- news_summary: string (concise summary of the item)
- importance_score: integer from 1 to 10 (10 being most important) based on potential global market impact
- identified_macro_factors: array of strings (e.g. inflation, interest rates, GDP growth, unemployment)
- impact_analysis: string (impact on the economy, markets and specific sectors)

News Items:
---
{news_text}
---

Return ONLY valid JSON of the form {{"macro_analysis": [ ... ]}}.
"""

MACRO_ANALYST_SYSTEM_MESSAGE = "You are a 'Senior Macro Research Analyst'. Analyze financial news and return ONLY valid JSON that follows the provided schema, including an importance score for every item."
