from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrelloLabel(BaseModel):
    id: str
    name: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloList(BaseModel):
    id: str
    name: Optional[str] = None
    closed: bool = False
    id_board: Optional[str] = Field(None, alias="idBoard")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloMember(BaseModel):
    """A board member, or the author embedded in a comment action."""

    id: str
    full_name: Optional[str] = Field(None, alias="fullName")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloAttachment(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloCheckItem(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloChecklist(BaseModel):
    id: str
    name: Optional[str] = None
    id_card: Optional[str] = Field(None, alias="idCard")
    check_items: List[TrelloCheckItem] = Field(default_factory=list, alias="checkItems")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloCard(BaseModel):
    id: str
    name: str = ""
    desc: str = ""
    url: str = ""
    attachments: List[TrelloAttachment] = Field(default_factory=list)
    id_list: Optional[str] = Field(None, alias="idList")
    id_labels: List[str] = Field(default_factory=list, alias="idLabels")
    id_members: Optional[List[str]] = Field(default_factory=list, alias="idMembers")
    due: Optional[str] = None
    closed: bool = False
    date_last_activity: Optional[str] = Field(None, alias="dateLastActivity")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloCardRef(BaseModel):
    """The trimmed card snapshot Trello embeds in action data."""

    id: str
    name: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloActionData(BaseModel):
    card: Optional[TrelloCardRef] = None
    text: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class TrelloAction(BaseModel):
    id: str
    type: Optional[str] = None
    date: Optional[str] = None
    data: TrelloActionData = Field(default_factory=TrelloActionData)
    member_creator: Optional[TrelloMember] = Field(None, alias="memberCreator")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def card_id(self) -> Optional[str]:
        return self.data.card.id if self.data.card else None


class TrelloBoard(BaseModel):
    """
    A full Trello board export.

    Only the collections the converter consumes are modelled; every other
    attribute of the export is kept as an extra field.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    cards: List[TrelloCard]
    lists: List[TrelloList]
    labels: List[TrelloLabel]
    checklists: List[TrelloChecklist]
    actions: List[TrelloAction]
    members: List[TrelloMember]

    model_config = ConfigDict(populate_by_name=True, extra="allow")
