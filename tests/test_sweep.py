from app.features.otp.workers.sweep import (
    SWEEP_JOB_ID,
    start_sweep_scheduler,
    stop_sweep_scheduler,
    sweep_expired_otps,
)


def test_sweep_keeps_pending_record(store, clock):
    otp_id, _ = store.create("a@x.com")
    clock.advance(minutes=9)

    assert sweep_expired_otps(store) == 0
    assert store.get(otp_id).verified is False


def test_sweep_removes_expired_record(store, clock):
    otp_id, _ = store.create("a@x.com")
    clock.advance(minutes=11)

    assert sweep_expired_otps(store) == 1
    assert otp_id not in store


def test_sweep_removes_expired_verified_record(store, clock, verified_otp):
    otp_id, _ = verified_otp
    clock.advance(minutes=11)

    sweep_expired_otps(store)

    assert otp_id not in store


def test_scheduler_registers_interval_job(store):
    sched = start_sweep_scheduler(store, interval_minutes=5)
    try:
        job = sched.get_job(SWEEP_JOB_ID)
        assert job is not None
        assert job.trigger.interval.total_seconds() == 300
        assert job.args == (store,)
    finally:
        stop_sweep_scheduler(sched)

    assert not sched.running


def test_stop_without_scheduler():
    stop_sweep_scheduler(None)
