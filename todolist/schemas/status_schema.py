# todolist/schemas/status_schema.py

from todolist.schemas.label_schema import LabelCreate, LabelRead, LabelUpdate, LabelViewModel


class StatusCreate(LabelCreate):
    pass


class StatusUpdate(LabelUpdate):
    pass


class StatusViewModel(LabelViewModel):
    pass


class StatusRead(LabelRead):
    pass
