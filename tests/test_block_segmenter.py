from resume_onboarding.core.block_segmenter import split_into_blocks


def test_blank_lines_separate_blocks():
    lines = [
        "ACME Jan 2020 - Present",
        "Engineer",
        "- did things",
        "",
        "",
        "Globex 2018 - 2019",
        "Developer",
    ]
    blocks = split_into_blocks(lines)
    assert [b.lines for b in blocks] == [
        ["ACME Jan 2020 - Present", "Engineer", "- did things"],
        ["Globex 2018 - 2019", "Developer"],
    ]


def test_date_line_opens_new_block():
    lines = ["Company A 2020 - 2021", "Title", "Company B 2018 - 2019", "Title"]
    blocks = split_into_blocks(lines)
    assert len(blocks) == 2
    assert blocks[1].lines[0] == "Company B 2018 - 2019"


def test_blocks_reproduce_non_blank_input():
    lines = ["", "Header", "detail", "", "Other 2019", "", "tail", ""]
    blocks = split_into_blocks(lines)
    assert all(b.lines[0].strip() for b in blocks)
    flattened = [line for b in blocks for line in b.lines]
    assert flattened == [line for line in lines if line.strip()]


def test_empty_region():
    assert split_into_blocks([]) == []
    assert split_into_blocks(["", "  "]) == []


def test_block_text():
    block = split_into_blocks(["a", "b"])[0]
    assert block.text == "a\nb"
