# parcelpost

An interactive console post-office desk. It keeps a list of post offices, each with a
postal index and X/Y coordinates, and a list of parcels that travel between them. The
prompts and messages are in Russian.

## Installation

```
pip install .
```

## Usage

```
parcelpost [--dir DIRECTORY]
```

`--dir` names the directory that holds the data files (the current directory by default).
The menu offers to:

1. send a parcel: sender, recipient, origin and destination office indexes, track number
   and weight are asked for. Both offices must be in the office list; the delivery time in
   days is the distance between them divided by 10, rounded up.
2. add a post office: a name (asked for but not stored), the index and the X and Y
   coordinates. The office is appended to the office list.
3. delete a post office: the offices are listed and one is picked by its number. Parcels
   whose track numbers are listed on that office's line are sent back (their destination
   becomes their origin) and the parcel file is saved.
4. list the post offices.
5. track a parcel by its track number: the days to its destination are counted down, one
   per press of Enter.
6. hand a parcel over: the recipient's name has to match, and the parcel is then removed.
7. let one day pass: every parcel still on its way has one day less to go.
0. save the parcels and exit. The parcels are also saved when input runs out.

## Data files

- `posts.txt`: one office per line: `index x y` followed by the track numbers of the
  parcels held there.
- `packages.txt`: a parcel count on the first line, then one parcel per line:
  `sender recipient origin destination track weight remaining_days`. Names must be single
  words.

## Library use

```python
from parcelpost.parcel import load_parcels, advance_time, save_parcels
from parcelpost.office import read_offices, delivery_days

parcels = load_parcels("packages.txt")
offices = read_offices("posts.txt")
print(delivery_days(offices, 101, 202))
for parcel, moved in advance_time(parcels):
    print(parcel.track_id, moved, parcel.remaining_time)
save_parcels("packages.txt", parcels)
```

`parcelpost.parcel` also has `find_parcel`, `remove_parcel` and `hand_over`, and
`parcelpost.office` has `write_offices`, `append_office` and `delete_office`. Failures
raise `ParcelError` or `OfficeError`.

`parcelpost.cli.run(input_stream, output, directory)` drives the same menu over any text
streams, so a session can be scripted.

## What it does not do

- Sending a parcel does not add its track number to any office line; the track numbers on
  an office's line are only those written into `posts.txt` by hand.
- Office names are not kept.
- Tracking only counts down on screen; it does not change the parcel's remaining days.
- There is no way to edit a parcel, or to remove one other than by handing it over.

## Tests

```
pip install .[test]
pytest
```