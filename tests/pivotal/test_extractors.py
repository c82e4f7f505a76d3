from board_builders import make_board, make_card, make_comment
from trello2pivotal.pivotal import extractors
from trello2pivotal.pivotal.models import StoryState, StoryType, TaskStatus
from trello2pivotal.trello.indexer import BoardIndex
from trello2pivotal.trello.models import TrelloAction, TrelloBoard, TrelloCard, TrelloCheckItem


def load(**collections):
    board = TrelloBoard.model_validate(make_board(**collections))
    return board, BoardIndex.from_board(board)


def test_pad_to_width_pads_and_truncates():
    assert extractors.pad_to_width(["a"], 3) == ["a", "", ""]
    assert extractors.pad_to_width(["a", "b", "c"], 2) == ["a", "b"]
    assert extractors.pad_to_width([], 2, ("", "")) == [("", ""), ("", "")]
    assert extractors.pad_to_width(["a"], 0) == []


def test_title_is_card_name():
    card = TrelloCard.model_validate(make_card(name="Fix | the thing"))
    assert extractors.card_title(card) == "Fix | the thing"


def test_description_links_back_to_trello_and_attachments():
    card = TrelloCard.model_validate(
        make_card(
            "c1",
            desc="Some details",
            url="https://trello.com/c/abc",
            attachments=[{"url": "https://example.com/1.png"}, {"url": "https://example.com/2.pdf"}],
        )
    )

    assert extractors.card_description(card) == (
        "Some details"
        "\n\nImported from Trello Card: https://trello.com/c/abc"
        "\n\nAttachment: https://example.com/1.png"
        "\n\nAttachment: https://example.com/2.pdf"
    )


def test_labels_include_due_date_and_list_name():
    board, index = load(
        cards=[make_card("c1", idLabels=["l1", "l2", "l3", "l404"], due="2021-08-01T12:00:00.000Z")],
        labels=[{"id": "l1", "name": "Bug"}, {"id": "l2", "name": ""}, {"id": "l3"}],
    )

    labels = extractors.card_labels(board.cards[0], index)

    assert labels == "Bug, unnamed, unnamed, 2021-08-01, Backlog"


def test_labels_without_labels_or_due_date():
    board, index = load(cards=[make_card("c1")])
    assert extractors.card_labels(board.cards[0], index) == "Backlog"


def test_labels_with_unknown_list():
    board, index = load(cards=[make_card("c1", idList="gone", idLabels=["l1"])], labels=[{"id": "l1", "name": "ops"}])
    assert extractors.card_labels(board.cards[0], index) == "ops"


def test_type_from_labels():
    assert extractors.card_type("Bug, Backlog") == StoryType.BUG
    assert extractors.card_type("Tech Debt, Backlog") == StoryType.CHORE
    assert extractors.card_type("bug, tech debt") == StoryType.CHORE
    assert extractors.card_type("ux, Backlog") == StoryType.FEATURE
    assert extractors.card_type("") == StoryType.FEATURE


def test_dates_depend_on_acceptance():
    card = TrelloCard.model_validate(make_card(dateLastActivity="2021-07-07T14:03:09.123Z"))

    assert extractors.card_created_at(card, StoryState.STARTED) == "2021-07-07T14:03:09.123Z"
    assert extractors.card_accepted_at(card, StoryState.STARTED) == ""
    assert extractors.card_created_at(card, StoryState.ACCEPTED) == ""
    assert extractors.card_accepted_at(card, StoryState.ACCEPTED) == "2021-07-07T14:03:09.123Z"


def test_owners_lookup_names_in_order():
    board, index = load(
        cards=[make_card("c1", idMembers=["m2", "m404", "m1"])],
        members=[{"id": "m1", "fullName": "Ada Lovelace"}, {"id": "m2", "fullName": "Grace Hopper"}],
    )

    assert extractors.card_owners(board.cards[0], index) == ["Grace Hopper", "Unknown", "Ada Lovelace"]


def test_owners_when_members_are_null():
    board, index = load(cards=[make_card("c1", idMembers=None)])
    assert extractors.card_owners(board.cards[0], index) == []


def test_task_status():
    assert extractors.task_status(TrelloCheckItem(state=" Complete ")) == TaskStatus.COMPLETED
    assert extractors.task_status(TrelloCheckItem(state="incomplete")) == TaskStatus.NOT_COMPLETED
    assert extractors.task_status(TrelloCheckItem()) == TaskStatus.NOT_COMPLETED


def test_tasks_flatten_checklists_in_order():
    board, index = load(
        cards=[make_card("c1"), make_card("c2")],
        checklists=[
            {"id": "cl1", "idCard": "c1", "checkItems": [
                {"name": "design", "state": "complete"},
                {"name": "build", "state": "incomplete"},
            ]},
            {"id": "cl2", "idCard": "c2", "checkItems": [{"name": "elsewhere", "state": "complete"}]},
            {"id": "cl3", "idCard": "c1", "checkItems": [{"name": "ship", "state": "complete"}]},
        ],
    )

    assert extractors.card_tasks(board.cards[0], index) == [
        ("design", "completed"),
        ("build", "Not Completed"),
        ("ship", "completed"),
    ]


def test_format_comment():
    action = TrelloAction.model_validate(
        make_comment("a1", "c1", "2021-03-05T09:07:03.000Z", "Looks good", author="Ada Lovelace")
    )

    assert extractors.format_comment(action) == (
        "Looks good\n*Created at: 09:07:03, Mar 5, 2021* (Ada Lovelace - Mar 5, 2021)"
    )


def test_format_comment_without_author():
    action = TrelloAction.model_validate(make_comment("a1", "c1", "2021-12-25T23:59:59.000Z", "hi", author=None))
    assert extractors.format_comment(action) == "hi\n*Created at: 23:59:59, Dec 25, 2021* (Unknown - Dec 25, 2021)"


def test_comments_newest_first():
    board, index = load(
        cards=[make_card("c1")],
        actions=[
            make_comment("a2", "c1", "2021-01-02T00:00:00.000Z", "middle"),
            make_comment("a3", "c1", "2021-01-03T00:00:00.000Z", "newest"),
            make_comment("a1", "c1", "2021-01-01T00:00:00.000Z", "oldest"),
        ],
    )

    comments = extractors.card_comments(board.cards[0], index)

    assert [comment.split("\n")[0] for comment in comments] == ["newest", "middle", "oldest"]


def test_comment_ties_keep_board_order():
    board, index = load(
        cards=[make_card("c1")],
        actions=[
            make_comment("a1", "c1", "2021-01-01T00:00:00.000Z", "first"),
            make_comment("a2", "c1", "2021-01-01T00:00:00.000Z", "second"),
            make_comment("a3", "c1", "2021-01-05T00:00:00.000Z", "later"),
        ],
    )

    comments = extractors.card_comments(board.cards[0], index)

    assert [comment.split("\n")[0] for comment in comments] == ["later", "first", "second"]


def test_parse_trello_date():
    parsed = extractors.parse_trello_date("2021-07-07T14:03:09.123Z")
    assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2021, 7, 7, 14)
    assert extractors.parse_trello_date("") is None
    assert extractors.parse_trello_date("yesterday") is None


def test_labels_skip_null_names():
    board, index = load(
        cards=[make_card("c1", idLabels=["l1", "l2"])],
        labels=[{"id": "l1", "name": None}, {"id": "l2", "name": "ux"}],
    )
    assert extractors.card_labels(board.cards[0], index) == "ux, Backlog"
