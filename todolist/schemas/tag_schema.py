# todolist/schemas/tag_schema.py

from todolist.schemas.label_schema import LabelCreate, LabelRead, LabelUpdate, LabelViewModel


class TagCreate(LabelCreate):
    pass


class TagUpdate(LabelUpdate):
    pass


class TagViewModel(LabelViewModel):
    pass


class TagRead(LabelRead):
    pass
