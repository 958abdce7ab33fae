from health_inequality.schema.run_meta import RunMeta


def test_run_meta_round_trip(tmp_path):
    meta = RunMeta.capture_context(
        run_id="abc",
        mode="psa",
        config={"n_groups": 5},
        inputs={"fitted": "fits.json"},
        seed=3,
        n_successful=10,
        n_skipped=1,
    )
    path = tmp_path / "run_meta.json"
    meta.write_atomic(path)
    restored = RunMeta.from_json(path.read_text())
    assert restored == meta
    assert restored.reproducibility.seed == 3
    assert "numpy" in restored.reproducibility.library_versions
    assert not (tmp_path / "run_meta.json.tmp").exists()


def test_run_meta_without_seed(tmp_path):
    meta = RunMeta.capture_context(run_id="base", mode="base_case", config={"n_groups": 5}, inputs={}, seed=None)
    path = tmp_path / "run_meta.json"
    meta.write_atomic(path)
    assert RunMeta.from_json(path.read_text()).reproducibility.seed is None
