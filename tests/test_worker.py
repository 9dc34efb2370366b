"""
Tests for the Celery integration task, run in-process.
"""

from worker.tasks import celery, integrate_task


def test_task_registered():
    assert integrate_task.name in celery.tasks


def test_direct_call_returns_payload():
    data = integrate_task(0.98, 3.9, 8.0, 50)
    assert data["termination"] == "truncated"
    assert len(data["samples"]) == 50
    assert data["E"] == 0.98


def test_eager_apply_rejects_inadmissible():
    result = integrate_task.apply(args=(0.90, 3.5, 8.0, 1500))
    data = result.get()
    assert data["samples"] == []
    assert data["termination"] == "rejected"
