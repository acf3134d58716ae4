"""Non-critical side effects of a request.

Persistence writes are best-effort: their failures are reported on the
`blog_summarizer.side_effects` logger and never change the response the
caller receives.
"""

import logging

side_effect_logger = logging.getLogger('blog_summarizer.side_effects')


def run_side_effect(name, func, *args, **kwargs):
    """
    Run a best-effort operation, handling errors gracefully.

    `func` may either raise or return an (result, error_message) tuple;
    both kinds of failure are logged without re-raising.

    Args:
        name: Short label used in log lines (e.g. 'supabase.save_summary')
        func: The function to call
        *args: Positional arguments to pass to the function
        **kwargs: Keyword arguments to pass to the function

    Returns:
        bool: True if the operation reported success

    Usage:
        run_side_effect('mongodb.save_full_text', save_full_text, record)
    """
    try:
        outcome = func(*args, **kwargs)
    except Exception:
        side_effect_logger.exception(f"{name} failed (non-critical)")
        return False

    if isinstance(outcome, tuple) and len(outcome) == 2 and outcome[1]:
        side_effect_logger.warning(f"{name} skipped or failed (non-critical): {outcome[1]}")
        return False

    side_effect_logger.info(f"{name} succeeded")
    return True
