"""The formatting structure is a tree of boxes.

It is built "before layout" from the style tree, with all dimensions set
to zero, then the layout engine sets the position and size of the boxes in
place.

"""
