from services.skill_gap import IN_DEMAND_SKILLS, compute_skill_gap


def test_skill_gap_split():
    report = compute_skill_gap(["react", "Docker", "Cobol"])
    assert report.have == ["React", "Docker"]
    assert len(report.need) == len(IN_DEMAND_SKILLS) - 2
    assert "React" not in report.need
    assert report.match_percentage == 13  # 2/15


def test_skill_gap_exact_names_only():
    report = compute_skill_gap(["ReactJS"])
    assert report.have == []


def test_skill_gap_empty():
    report = compute_skill_gap([])
    assert report.have == []
    assert report.need == list(IN_DEMAND_SKILLS)
    assert report.match_percentage == 0


def test_skill_gap_full():
    assert compute_skill_gap(list(IN_DEMAND_SKILLS)).match_percentage == 100
