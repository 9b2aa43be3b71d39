from enum import Enum


class OptionsMode(str, Enum):
    """
    查看 BHAP 页面时，当前用户可用的操作模式。
    """

    NOT_LOGGED_IN = "notLoggedIn"
    DRAFT_AUTHOR = "draftAuthor"
    DRAFT_NOT_AUTHOR = "draftNotAuthor"
    DISCUSSION_AUTHOR = "discussionAuthor"
    DISCUSSION_NO_VOTE = "discussionNoVote"
    DISCUSSION_VOTED = "discussionVoted"
    FINALIZED = "finalized"
