# todolist/schemas/priority_schema.py

from todolist.schemas.label_schema import LabelCreate, LabelRead, LabelUpdate, LabelViewModel


class PriorityCreate(LabelCreate):
    pass


class PriorityUpdate(LabelUpdate):
    pass


class PriorityViewModel(LabelViewModel):
    pass


class PriorityRead(LabelRead):
    pass
