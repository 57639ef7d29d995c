from parse_kit.observability import MetricsHook, NoOpMetricsHook, names


def test_noop_hook_accepts_all_calls() -> None:
    hook: MetricsHook = NoOpMetricsHook()

    hook.record_latency(names.PARSE_DURATION, 12.5, labels={"source": "path"})
    hook.increment(names.JOBS_SUBMITTED_TOTAL)
    hook.increment(names.JOB_FAILURES_TOTAL, 2, labels={"state": "timed_out"})


def test_metric_names_are_unique() -> None:
    values = [v for k, v in vars(names).items() if k.isupper()]
    assert len(values) == len(set(values))
